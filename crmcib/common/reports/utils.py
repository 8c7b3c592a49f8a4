from typing import Optional

from crmcib.common.reports.dto import ReportItemContextDto


def add_context_to_message(
    msg: str, context: Optional[ReportItemContextDto]
) -> str:
    if context:
        msg = f"{context.node}: {msg}"
    return msg
