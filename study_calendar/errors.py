class StudyCalendarError(Exception):
    pass


class StoreError(StudyCalendarError):
    """Remote store rejected a request or could not be reached."""

    def __init__(self, message, status=None):
        super().__init__(message)
        self.status = status


class StoreNotReady(StudyCalendarError):
    pass


class ConfigError(StudyCalendarError):
    pass
