from .envelope import ApiResponse, PageMeta
from .user import UserProfileUpdate, UserResponse
from .daily_log import DailyLogCreate, DailyLogUpdate
from .ielts import (
    IeltsMistakeCreate,
    IeltsSessionCreate,
    IeltsSessionUpdate,
    IeltsVocabCreate,
    IeltsVocabUpdate,
)
from .journal import JournalEntryCreate, JournalEntryUpdate
from .book import (
    BookCreate,
    BookReadingSessionCreate,
    BookReadingSessionUpdate,
    BookUpdate,
)
from .skill import SkillSessionCreate, SkillSessionUpdate
from .workout import WorkoutSessionCreate, WorkoutSessionUpdate, WorkoutSetCreate
from .wellness import WellnessEntryCreate, WellnessEntryUpdate
from .financial import FinancialTransactionCreate, FinancialTransactionUpdate
from .reflection import ReflectionEntryCreate, ReflectionEntryUpdate
from .career import (
    CareerActivityCreate,
    CareerActivityUpdate,
    JobApplicationCreate,
    JobApplicationUpdate,
)
from .masters_prep import (
    MastersPrepItemCreate,
    MastersPrepItemUpdate,
    MastersPrepSessionCreate,
)
from .project import GoalCreate, GoalUpdate, ProjectCreate, ProjectUpdate

__all__ = [
    "ApiResponse",
    "PageMeta",
    "UserProfileUpdate",
    "UserResponse",
    "DailyLogCreate",
    "DailyLogUpdate",
    "IeltsMistakeCreate",
    "IeltsSessionCreate",
    "IeltsSessionUpdate",
    "IeltsVocabCreate",
    "IeltsVocabUpdate",
    "JournalEntryCreate",
    "JournalEntryUpdate",
    "BookCreate",
    "BookReadingSessionCreate",
    "BookReadingSessionUpdate",
    "BookUpdate",
    "SkillSessionCreate",
    "SkillSessionUpdate",
    "WorkoutSessionCreate",
    "WorkoutSessionUpdate",
    "WorkoutSetCreate",
    "WellnessEntryCreate",
    "WellnessEntryUpdate",
    "FinancialTransactionCreate",
    "FinancialTransactionUpdate",
    "ReflectionEntryCreate",
    "ReflectionEntryUpdate",
    "CareerActivityCreate",
    "CareerActivityUpdate",
    "JobApplicationCreate",
    "JobApplicationUpdate",
    "MastersPrepItemCreate",
    "MastersPrepItemUpdate",
    "MastersPrepSessionCreate",
    "GoalCreate",
    "GoalUpdate",
    "ProjectCreate",
    "ProjectUpdate",
]
