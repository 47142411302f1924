from .user import UserModel
from .daily_log import DailyLogModel
from .ielts import IeltsMistakeModel, IeltsSessionModel, IeltsVocabModel
from .journal import JournalEntryModel
from .book import BookModel, BookReadingSessionModel
from .project import GoalModel, ProjectModel
from .skill import SkillSessionModel
from .workout import WorkoutSessionModel, WorkoutSetModel
from .wellness import WellnessEntryModel
from .financial import FinancialTransactionModel
from .reflection import ReflectionEntryModel
from .career import CareerActivityModel, JobApplicationModel
from .masters_prep import MastersPrepItemModel, MastersPrepSessionModel

__all__ = [
    "UserModel",
    "DailyLogModel",
    "IeltsMistakeModel",
    "IeltsSessionModel",
    "IeltsVocabModel",
    "JournalEntryModel",
    "BookModel",
    "BookReadingSessionModel",
    "GoalModel",
    "ProjectModel",
    "SkillSessionModel",
    "WorkoutSessionModel",
    "WorkoutSetModel",
    "WellnessEntryModel",
    "FinancialTransactionModel",
    "ReflectionEntryModel",
    "CareerActivityModel",
    "JobApplicationModel",
    "MastersPrepItemModel",
    "MastersPrepSessionModel",
]
