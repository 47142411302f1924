"""Entity descriptors for every life-domain module.

Each descriptor is built once at import time and shared read-only by all
requests for that entity.
"""

from lifelog.domain.entities import (
    ChildSpec,
    EntityDescriptor,
    RelationSpec,
    SortDirection,
    SortSpec,
)

_BY_DATE = (SortSpec("date", SortDirection.DESC),)
_BY_CREATED = (SortSpec("created_at", SortDirection.DESC),)
_BY_UPDATED = (SortSpec("updated_at", SortDirection.DESC),)
_RECENT_SESSIONS = SortSpec("date", SortDirection.DESC)

DAILY_LOG = EntityDescriptor(
    entity="daily_logs",
    label="Daily log",
    search_fields=("main_focus", "notes"),
    order_by=_BY_DATE,
    upsert_by_date=True,
)

IELTS_SESSION = EntityDescriptor(
    entity="ielts_sessions",
    label="IELTS session",
    search_fields=("material_name", "sub_skill", "notes"),
    order_by=_BY_DATE,
    relations=(RelationSpec("mistakes"), RelationSpec("vocab")),
    children=(
        ChildSpec(
            name="mistakes",
            entity="ielts_mistakes",
            foreign_key="ielts_session_id",
            label="IELTS mistake",
        ),
    ),
)

IELTS_VOCAB = EntityDescriptor(
    entity="ielts_vocab",
    label="Vocabulary",
    search_fields=("phrase", "meaning"),
    date_field="created_at",
    order_by=_BY_CREATED,
)

JOURNAL_ENTRY = EntityDescriptor(
    entity="journal_entries",
    label="Journal entry",
    search_fields=("title", "authors", "summary", "key_insights"),
    order_by=_BY_DATE,
)

BOOK = EntityDescriptor(
    entity="books",
    label="Book",
    search_fields=("title", "author"),
    date_field="created_at",
    order_by=_BY_CREATED,
    relations=(RelationSpec("reading_sessions", order_by=_RECENT_SESSIONS, limit=5),),
)

BOOK_READING_SESSION = EntityDescriptor(
    entity="book_reading_sessions",
    label="Reading session",
    search_fields=("summary", "key_ideas", "chapter_label"),
    order_by=_BY_DATE,
    relations=(RelationSpec("book"),),
)

SKILL_SESSION = EntityDescriptor(
    entity="skill_sessions",
    label="Skill session",
    search_fields=("sub_skill", "output_summary", "learned_points"),
    order_by=_BY_DATE,
    relations=(RelationSpec("project"),),
)

WORKOUT_SESSION = EntityDescriptor(
    entity="workout_sessions",
    label="Workout session",
    search_fields=("routine_name", "notes", "post_mood"),
    order_by=_BY_DATE,
    relations=(RelationSpec("sets"),),
    children=(
        ChildSpec(
            name="sets",
            entity="workout_sets",
            foreign_key="workout_session_id",
            label="Workout set",
        ),
    ),
)

WELLNESS_ENTRY = EntityDescriptor(
    entity="wellness_entries",
    label="Wellness entry",
    search_fields=("physical_symptoms", "wellness_note"),
    order_by=_BY_DATE,
    upsert_by_date=True,
)

FINANCIAL_TRANSACTION = EntityDescriptor(
    entity="financial_transactions",
    label="Transaction",
    search_fields=("description", "notes"),
    order_by=_BY_DATE,
)

REFLECTION_ENTRY = EntityDescriptor(
    entity="reflection_entries",
    label="Reflection",
    search_fields=("went_well", "went_wrong", "learned_today", "gratitude"),
    order_by=_BY_DATE,
    upsert_by_date=True,
)

CAREER_ACTIVITY = EntityDescriptor(
    entity="career_activities",
    label="Career activity",
    search_fields=("target_entity", "description", "output_summary"),
    order_by=_BY_DATE,
    relations=(RelationSpec("project"),),
)

JOB_APPLICATION = EntityDescriptor(
    entity="job_applications",
    label="Job application",
    search_fields=("company", "role_title", "notes"),
    date_field="applied_date",
    order_by=_BY_CREATED,
)

MASTERS_PREP_ITEM = EntityDescriptor(
    entity="masters_prep_items",
    label="Masters prep item",
    search_fields=("task_title", "description", "subcategory"),
    date_field="created_at",
    order_by=_BY_UPDATED,
    relations=(
        RelationSpec("related_goal"),
        RelationSpec("sessions", order_by=_RECENT_SESSIONS, limit=5),
    ),
    children=(
        ChildSpec(
            name="sessions",
            entity="masters_prep_sessions",
            foreign_key="prep_item_id",
            label="Prep session",
            carries_owner=True,
        ),
    ),
)

PROJECT = EntityDescriptor(
    entity="projects",
    label="Project",
    search_fields=("name", "description"),
    date_field="created_at",
    order_by=_BY_UPDATED,
    relations=(RelationSpec("goals"),),
)

GOAL = EntityDescriptor(
    entity="goals",
    label="Goal",
    search_fields=("title", "description"),
    date_field="created_at",
    order_by=_BY_CREATED,
    relations=(RelationSpec("project"),),
)

ALL_DESCRIPTORS = (
    DAILY_LOG,
    IELTS_SESSION,
    IELTS_VOCAB,
    JOURNAL_ENTRY,
    BOOK,
    BOOK_READING_SESSION,
    SKILL_SESSION,
    WORKOUT_SESSION,
    WELLNESS_ENTRY,
    FINANCIAL_TRANSACTION,
    REFLECTION_ENTRY,
    CAREER_ACTIVITY,
    JOB_APPLICATION,
    MASTERS_PREP_ITEM,
    PROJECT,
    GOAL,
)
