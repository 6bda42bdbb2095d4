"""Tests for bounded-concurrency batch uploads."""

import asyncio

import pytest

from helpers import TEST_ORDER_ID, TEST_USER_ID, InMemoryStorage, png_bytes
from lablink.config.constants import MB
from lablink.platform.files.application.commands import UploadFileCommand
from lablink.platform.files.application.services import (
    BatchUploadCoordinator,
    create_batch_upload_coordinator,
)
from lablink.platform.files.application.services.batch_upload_coordinator import (
    chunk,
    derive_concurrency,
)
from lablink.platform.files.core.entities.upload_task import UploadResult, UploadTask


def make_task(size: int = 512, filename: str = "scan.png") -> UploadTask:
    return UploadTask.create(
        content=png_bytes(size),
        filename=filename,
        content_type="image/png",
        order_id=TEST_ORDER_ID,
        user_id=TEST_USER_ID,
    )


class FlakyCommand:
    """Upload command stand-in that fails for chosen filenames."""

    def __init__(self, failing=(), raising=()):
        self.failing = set(failing)
        self.raising = set(raising)
        self.in_flight = 0
        self.max_in_flight = 0

    async def execute(self, task):
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(0.01)
            if task.filename in self.raising:
                raise RuntimeError("connection dropped")
            if task.filename in self.failing:
                return UploadResult.failed(task.id, "Storage upload failed: boom")
            return UploadResult.succeeded(task.id, task.storage_path)
        finally:
            self.in_flight -= 1


class TestDeriveConcurrency:
    def test_empty_batch(self):
        assert derive_concurrency([]) == 3

    def test_small_files(self):
        assert derive_concurrency([make_task(200 * 1024)] * 4) == 5

    def test_medium_files(self):
        assert derive_concurrency([make_task(2 * MB)] * 2) == 3

    def test_large_files(self):
        assert derive_concurrency([make_task(6 * MB)]) == 2

    def test_boundaries(self):
        assert derive_concurrency([make_task(1 * MB)]) == 3
        assert derive_concurrency([make_task(5 * MB)]) == 3


class TestChunk:
    def test_chunk(self):
        assert chunk([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]

    def test_chunk_empty(self):
        assert chunk([], 3) == []

    def test_chunk_rejects_zero(self):
        with pytest.raises(ValueError):
            chunk([1], 0)


class TestBatchUploadCoordinator:
    """Bounded window, failure isolation and result bookkeeping."""

    @pytest.mark.asyncio
    async def test_empty_batch_returns_nothing(self):
        coordinator = BatchUploadCoordinator(FlakyCommand())
        assert await coordinator.upload_batch([]) == []

    @pytest.mark.asyncio
    async def test_rejects_invalid_concurrency(self):
        coordinator = BatchUploadCoordinator(FlakyCommand())
        with pytest.raises(ValueError):
            await coordinator.upload_batch([make_task()], concurrency=0)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("concurrency", [1, 2, 3, 5])
    async def test_never_exceeds_concurrency(self, concurrency):
        command = FlakyCommand()
        coordinator = BatchUploadCoordinator(command)
        tasks = [make_task(filename=f"scan-{i}.png") for i in range(12)]

        results = await coordinator.upload_batch(tasks, concurrency=concurrency)

        assert len(results) == 12
        assert command.max_in_flight == concurrency

    @pytest.mark.asyncio
    async def test_one_result_per_task(self):
        coordinator = BatchUploadCoordinator(FlakyCommand())
        tasks = [make_task(filename=f"scan-{i}.png") for i in range(7)]

        results = await coordinator.upload_batch(tasks, concurrency=3)

        assert sorted(result.id for result in results) == sorted(task.id for task in tasks)

    @pytest.mark.asyncio
    async def test_failures_are_isolated(self):
        command = FlakyCommand(failing={"bad.png"}, raising={"worse.png"})
        coordinator = BatchUploadCoordinator(command)
        tasks = [
            make_task(filename="good-1.png"),
            make_task(filename="bad.png"),
            make_task(filename="worse.png"),
            make_task(filename="good-2.png"),
        ]

        results = await coordinator.upload_batch(tasks, concurrency=2)
        by_id = {result.id: result for result in results}

        assert by_id[tasks[0].id].success
        assert by_id[tasks[3].id].success
        assert by_id[tasks[1].id].error == "Storage upload failed: boom"
        assert by_id[tasks[2].id].error == "connection dropped"

    @pytest.mark.asyncio
    async def test_batches_run_sequentially(self):
        command = FlakyCommand()
        coordinator = BatchUploadCoordinator(command)
        tasks = [make_task(filename=f"scan-{i}.png") for i in range(25)]

        results = await coordinator.upload_in_batches(tasks, batch_size=10, concurrency=4)

        assert len(results) == 25
        assert command.max_in_flight == 4

    @pytest.mark.asyncio
    async def test_with_real_upload_command(self, attachment_repository):
        storage = InMemoryStorage(upload_delay=0.01)
        command = UploadFileCommand(storage, attachment_repository, progress_interval=0.001)
        coordinator = create_batch_upload_coordinator(command)
        tasks = [make_task(filename=f"scan-{i}.png") for i in range(8)]

        results = await coordinator.upload_batch(tasks)

        assert all(result.success for result in results)
        assert storage.max_in_flight <= 5
        assert len(attachment_repository.records) == 8
