"""LabLink upload and order gateway.

Server-side building blocks for the dentist/laboratory marketplace:
upload integrity validation, bounded-concurrency batch uploads with
compensating rollback, rolling-window rate limiting and order intake.
"""

from .__version__ import __version__

__all__ = ["__version__"]
