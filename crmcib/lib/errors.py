from crmcib.common.reports import ReportItem


class LibraryError(Exception):
    """
    Raised by the library, carries report items describing the failure
    """

    def __init__(self, *args: ReportItem):
        super().__init__(*args)
