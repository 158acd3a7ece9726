from datetime import timedelta

from temporalio import workflow
from temporalio.common import RetryPolicy


@workflow.defn(name="CleanScreenshotsWorkflow")
class CleanScreenshotsWorkflow:
    """Scheduled job removing screenshots older than each project's retention.

    Started once with a cron schedule; Temporal re-runs it on every tick.
    """

    @workflow.run
    async def run(self) -> dict:
        return await workflow.execute_activity(
            "clean_screenshots",
            start_to_close_timeout=timedelta(hours=1),
            retry_policy=RetryPolicy(maximum_attempts=1),
        )
