"""Tests for test item deletion use cases."""

from __future__ import annotations

import pytest
from returns.result import Failure, Success

from application.use_cases.test_item_use_cases import (
    DeleteTestItemsUseCase,
    DeleteTestItemUseCase,
)
from domain.value_objects.status import Status
from tests.mocks import (
    PROJECT_ID,
    MockExternalEventPublisher,
    MockLaunchRepository,
    MockLogIndexer,
    MockLogRepository,
    MockTestItemRepository,
    make_item,
    make_launch,
)


class DeletionFixture:
    """Wires the mock collaborators of both delete use cases together."""

    def __init__(self, *items, launches=None, logs=None, indexer=None, publisher=None) -> None:
        self.items = MockTestItemRepository(list(items))
        self.launches = MockLaunchRepository(self.items, launches or [make_launch()])
        self.logs = MockLogRepository(logs or {})
        self.indexer = indexer or MockLogIndexer()
        self.publisher = publisher or MockExternalEventPublisher()

    def single(self) -> DeleteTestItemUseCase:
        return DeleteTestItemUseCase(
            self.items,
            self.launches,
            self.logs,
            self.indexer,
            self.publisher,
        )

    def batch(self) -> DeleteTestItemsUseCase:
        return DeleteTestItemsUseCase(
            self.items,
            self.launches,
            self.logs,
            self.indexer,
            self.publisher,
        )


class TestDeleteTestItemUseCase:
    """Test DeleteTestItemUseCase."""

    @pytest.mark.asyncio
    async def test_delete_item_with_cascade(self, owner, project) -> None:
        """Test deleting item 42 under parent 10 in launch 5."""
        env = DeletionFixture(
            make_item(10, "10", has_children=True),
            make_item(42, "10.42", has_children=True),
            make_item(43, "10.42.43"),
            logs={1001: 42, 1002: 43, 1003: 10},
        )

        result = await env.single().execute(42, project, owner)

        assert isinstance(result, Success)
        assert result.unwrap().message == (
            "Test Item with ID = 42 has been successfully deleted."
        )
        assert env.items.delete_by_id_calls == [42]
        assert set(env.items.items) == {10}
        assert env.items.items[10].has_children is False
        assert env.launches.saved[-1].has_retries is False
        assert env.indexer.clean_calls == [(PROJECT_ID, [1001, 1002])]
        assert env.publisher.attachments_deleted == [42]

    @pytest.mark.asyncio
    async def test_descendant_logs_are_purged_from_index(self, owner, project) -> None:
        """Test that logs of cascaded children leave the index with the item."""
        env = DeletionFixture(
            make_item(42, "42", has_children=True),
            make_item(43, "42.43"),
            make_item(50, "50"),
            logs={1: 42, 2: 43, 3: 50},
        )

        result = await env.single().execute(42, project, owner)

        assert isinstance(result, Success)
        assert env.indexer.clean_calls == [(PROJECT_ID, [1, 2])]

    @pytest.mark.asyncio
    async def test_parent_keeps_children_flag_when_sibling_remains(
        self,
        owner,
        project,
    ) -> None:
        env = DeletionFixture(
            make_item(10, "10", has_children=True),
            make_item(42, "10.42"),
            make_item(44, "10.44"),
        )

        result = await env.single().execute(42, project, owner)

        assert isinstance(result, Success)
        assert env.items.items[10].has_children is True

    @pytest.mark.asyncio
    async def test_root_item_needs_no_parent_repair(self, owner, project) -> None:
        env = DeletionFixture(make_item(1, "1"))

        result = await env.single().execute(1, project, owner)

        assert isinstance(result, Success)
        assert env.items.saved == []

    @pytest.mark.asyncio
    async def test_has_retries_recomputed_after_delete(self, owner, project) -> None:
        """Test that deleting the only retried item clears the launch flag."""
        env = DeletionFixture(
            make_item(10, "10", has_children=True),
            make_item(42, "10.42"),
            make_item(43, "10.42.43", retry_of=42),
            make_item(50, "50"),
            launches=[make_launch(has_retries=True)],
        )

        result = await env.single().execute(42, project, owner)

        assert isinstance(result, Success)
        assert env.launches.launches[5].has_retries is False

    @pytest.mark.asyncio
    async def test_has_retries_kept_when_other_retries_remain(self, owner, project) -> None:
        env = DeletionFixture(
            make_item(1, "1"),
            make_item(2, "2"),
            make_item(3, "2.3", retry_of=2),
            launches=[make_launch(has_retries=True)],
        )

        result = await env.single().execute(1, project, owner)

        assert isinstance(result, Success)
        assert env.launches.launches[5].has_retries is True

    @pytest.mark.asyncio
    async def test_retry_is_rejected_without_mutation(self, owner, project) -> None:
        env = DeletionFixture(make_item(42, "42"), make_item(43, "42.43", retry_of=42))

        result = await env.single().execute(43, project, owner)

        assert isinstance(result, Failure)
        assert result.failure().category == "retries_handler_error"
        assert "43" in result.failure().message
        assert env.items.delete_by_id_calls == []
        assert env.launches.saved == []
        assert env.indexer.clean_calls == []
        assert env.publisher.attachments_deleted == []

    @pytest.mark.asyncio
    async def test_item_in_progress_is_rejected(self, owner, project) -> None:
        env = DeletionFixture(make_item(42, "42", status=Status.IN_PROGRESS))

        result = await env.single().execute(42, project, owner)

        assert isinstance(result, Failure)
        assert result.failure().category == "item_not_finished"
        assert 42 in env.items.items

    @pytest.mark.asyncio
    async def test_launch_in_progress_is_rejected(self, owner, project) -> None:
        env = DeletionFixture(
            make_item(42, "42"),
            launches=[make_launch(status=Status.IN_PROGRESS)],
        )

        result = await env.single().execute(42, project, owner)

        assert isinstance(result, Failure)
        assert result.failure().category == "launch_not_finished"
        assert env.items.delete_by_id_calls == []

    @pytest.mark.asyncio
    async def test_non_owner_is_denied(self, stranger, project) -> None:
        env = DeletionFixture(make_item(42, "42"))

        result = await env.single().execute(42, project, stranger)

        assert isinstance(result, Failure)
        assert result.failure().category == "access_denied"
        assert result.failure().message == "You are not a launch owner."

    @pytest.mark.asyncio
    async def test_launch_in_other_project_is_forbidden(self, owner, project) -> None:
        env = DeletionFixture(make_item(42, "42"), launches=[make_launch(project_id=99)])

        result = await env.single().execute(42, project, owner)

        assert isinstance(result, Failure)
        assert result.failure().category == "forbidden_operation"

    @pytest.mark.asyncio
    async def test_missing_item(self, owner, project) -> None:
        env = DeletionFixture()

        result = await env.single().execute(42, project, owner)

        assert isinstance(result, Failure)
        assert result.failure().category == "not_found"
        assert "42" in result.failure().message

    @pytest.mark.asyncio
    async def test_missing_launch(self, owner, project) -> None:
        env = DeletionFixture(make_item(42, "42", launch_id=6))

        result = await env.single().execute(42, project, owner)

        assert isinstance(result, Failure)
        assert result.failure().category == "not_found"

    @pytest.mark.asyncio
    async def test_side_effect_failures_do_not_fail_delete(self, owner, project) -> None:
        """Test that index and event failures are logged but swallowed."""
        env = DeletionFixture(
            make_item(42, "42"),
            logs={1001: 42},
            indexer=MockLogIndexer(raise_on_call=RuntimeError("index down")),
            publisher=MockExternalEventPublisher(raise_on_call=RuntimeError("bus down")),
        )

        result = await env.single().execute(42, project, owner)

        assert isinstance(result, Success)
        assert 42 not in env.items.items

    @pytest.mark.asyncio
    async def test_works_without_event_publisher(self, owner, project) -> None:
        env = DeletionFixture(make_item(42, "42"))
        use_case = DeleteTestItemUseCase(env.items, env.launches, env.logs, env.indexer)

        result = await use_case.execute(42, project, owner)

        assert isinstance(result, Success)

    @pytest.mark.asyncio
    async def test_unexpected_error_becomes_internal_error(self, owner, project) -> None:
        env = DeletionFixture(make_item(42, "42"))

        async def broken(_item_id: int) -> None:
            msg = "connection reset"
            raise RuntimeError(msg)

        env.items.delete_by_id = broken

        result = await env.single().execute(42, project, owner)

        assert isinstance(result, Failure)
        assert result.failure().category == "internal_error"


class TestDeleteTestItemsUseCase:
    """Test DeleteTestItemsUseCase."""

    @pytest.mark.asyncio
    async def test_nested_request_confirms_each_id_once(self, owner, project) -> None:
        """Test deleting [1, 2] where 2 is a descendant of 1."""
        env = DeletionFixture(
            make_item(1, "1", has_children=True),
            make_item(2, "1.2", has_children=True),
            make_item(3, "1.2.3"),
            make_item(4, "4"),
            logs={11: 1, 12: 2, 13: 3, 14: 4},
        )

        result = await env.batch().execute([1, 2], project, owner)

        assert isinstance(result, Success)
        messages = [c.message for c in result.unwrap()]
        assert messages == [
            "Test Item with ID = 1 has been successfully deleted.",
            "Test Item with ID = 2 has been successfully deleted.",
            "Test Item with ID = 3 has been successfully deleted.",
        ]
        assert env.items.descendant_queries == ["1"]
        assert env.items.delete_all_by_id_calls == [[1, 2, 3]]
        assert set(env.items.items) == {4}
        assert env.indexer.clean_calls == [(PROJECT_ID, [11, 12, 13])]
        assert env.publisher.attachments_deleted == [1, 2]

    @pytest.mark.asyncio
    async def test_request_order_does_not_matter(self, owner, project) -> None:
        env = DeletionFixture(
            make_item(1, "1", has_children=True),
            make_item(2, "1.2"),
        )

        result = await env.batch().execute([2, 1], project, owner)

        assert isinstance(result, Success)
        assert len(result.unwrap()) == 2
        assert env.items.descendant_queries == ["1"]

    @pytest.mark.asyncio
    async def test_duplicate_ids_are_ignored(self, owner, project) -> None:
        env = DeletionFixture(make_item(1, "1"))

        result = await env.batch().execute([1, 1], project, owner)

        assert isinstance(result, Success)
        assert len(result.unwrap()) == 1
        assert env.publisher.attachments_deleted == [1]

    @pytest.mark.asyncio
    async def test_empty_request(self, owner, project) -> None:
        env = DeletionFixture()

        result = await env.batch().execute([], project, owner)

        assert isinstance(result, Success)
        assert result.unwrap() == []
        assert env.items.delete_all_by_id_calls == []

    @pytest.mark.asyncio
    async def test_authorization_is_all_or_nothing(self, owner, project) -> None:
        """Test that one forbidden item blocks the whole batch."""
        env = DeletionFixture(
            make_item(1, "1"),
            make_item(2, "2", launch_id=6),
            launches=[make_launch(), make_launch(6, status=Status.IN_PROGRESS)],
        )

        result = await env.batch().execute([1, 2], project, owner)

        assert isinstance(result, Failure)
        assert result.failure().category == "launch_not_finished"
        assert env.items.delete_all_by_id_calls == []
        assert set(env.items.items) == {1, 2}
        assert env.launches.saved == []
        assert env.publisher.attachments_deleted == []

    @pytest.mark.asyncio
    async def test_requested_retry_fails_batch(self, owner, project) -> None:
        env = DeletionFixture(
            make_item(1, "1", has_children=True),
            make_item(2, "1.2", retry_of=1),
            launches=[make_launch(has_retries=True)],
        )

        result = await env.batch().execute([1, 2], project, owner)

        assert isinstance(result, Failure)
        assert result.failure().category == "retries_handler_error"
        assert "2" in result.failure().message
        assert env.items.delete_all_by_id_calls == []
        assert set(env.items.items) == {1, 2}
        assert env.launches.saved == []
        assert env.indexer.clean_calls == []

    @pytest.mark.asyncio
    async def test_unknown_id_fails_batch(self, owner, project) -> None:
        env = DeletionFixture(make_item(1, "1"))

        result = await env.batch().execute([1, 99], project, owner)

        assert isinstance(result, Failure)
        assert result.failure().category == "not_found"
        assert "99" in result.failure().message
        assert 1 in env.items.items

    @pytest.mark.asyncio
    async def test_surviving_parent_flags_are_requeried(self, owner, project) -> None:
        """Test parents keep has_children while other children remain."""
        env = DeletionFixture(
            make_item(10, "10", has_children=True),
            make_item(11, "10.11"),
            make_item(12, "10.12"),
            make_item(20, "20", has_children=True),
            make_item(21, "20.21"),
        )

        result = await env.batch().execute([11, 21], project, owner)

        assert isinstance(result, Success)
        assert env.items.items[10].has_children is True
        assert env.items.items[20].has_children is False

    @pytest.mark.asyncio
    async def test_deleted_parents_are_not_repaired(self, owner, project) -> None:
        env = DeletionFixture(
            make_item(1, "1", has_children=True),
            make_item(2, "1.2"),
        )

        result = await env.batch().execute([1, 2], project, owner)

        assert isinstance(result, Success)
        assert env.items.saved == []

    @pytest.mark.asyncio
    async def test_has_retries_recomputed_per_launch(self, owner, project) -> None:
        env = DeletionFixture(
            make_item(1, "1"),
            make_item(2, "1.2", retry_of=1),
            make_item(3, "3", launch_id=6),
            make_item(4, "4", launch_id=6),
            make_item(5, "4.5", retry_of=4, launch_id=6),
            launches=[make_launch(has_retries=True), make_launch(6, has_retries=True)],
        )

        result = await env.batch().execute([1, 3], project, owner)

        assert isinstance(result, Success)
        assert env.launches.launches[5].has_retries is False
        assert env.launches.launches[6].has_retries is True

    @pytest.mark.asyncio
    async def test_batch_side_effect_failures_are_swallowed(self, owner, project) -> None:
        env = DeletionFixture(
            make_item(1, "1"),
            logs={11: 1},
            indexer=MockLogIndexer(raise_on_call=RuntimeError("index down")),
            publisher=MockExternalEventPublisher(raise_on_call=RuntimeError("bus down")),
        )

        result = await env.batch().execute([1], project, owner)

        assert isinstance(result, Success)
        assert env.items.items == {}

    @pytest.mark.asyncio
    async def test_admin_may_delete_across_projects(self, admin, project) -> None:
        env = DeletionFixture(make_item(1, "1"), launches=[make_launch(project_id=99)])

        result = await env.batch().execute([1], project, admin)

        assert isinstance(result, Success)
