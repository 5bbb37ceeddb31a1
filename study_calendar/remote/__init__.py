from .api import StudyRecordsAPI

__all__ = ['StudyRecordsAPI']
