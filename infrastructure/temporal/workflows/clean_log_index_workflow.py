from datetime import timedelta

from temporalio import workflow
from temporalio.common import RetryPolicy


@workflow.defn(name="CleanLogIndexWorkflow")
class CleanLogIndexWorkflow:
    """Removes the logs of deleted test items from the search index.

    Deletion by payload filter is idempotent, so the activity is safe to retry.
    """

    @workflow.run
    async def run(self, project_id: int, log_ids: list[int]) -> dict:
        retry_policy = RetryPolicy(
            initial_interval=timedelta(seconds=1),
            maximum_interval=timedelta(seconds=30),
            maximum_attempts=5,
            backoff_coefficient=2.0,
        )

        result = await workflow.execute_activity(
            "clean_log_index",
            args=[project_id, log_ids],
            start_to_close_timeout=timedelta(minutes=2),
            retry_policy=retry_policy,
        )

        workflow.logger.info(
            f"Log index cleaned for project_id={project_id}, result={result}",
        )
        return result
