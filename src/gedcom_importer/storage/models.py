"""
Database models for the genealogy store.

All tables use SQLModel. Identifiers are 36-character UUID strings produced by
``identity.new_uuid``. ``gedcom_id`` columns hold the digits-only GEDCOM id
used to match records again on re-import within a tree. Timestamps are
stored naive, in UTC.
"""

from datetime import date, datetime, time, timezone
from typing import Optional

from sqlalchemy import Column, DateTime
from sqlmodel import Field, SQLModel

from gedcom_importer.identity.uuid_factory import new_uuid

MEDIA_TYPE_PHOTO = "PHOTO"
MEDIA_TYPE_DOCUMENT = "DOCUMENT"


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Tree(SQLModel, table=True):
    """A family tree: the scope of imports and of Sosa numbering."""

    __tablename__ = "trees"

    id: str = Field(default_factory=new_uuid, primary_key=True, max_length=36)
    name: str = Field(index=True, max_length=255)
    description: Optional[str] = None
    root_person_id: Optional[str] = Field(default=None, max_length=36)

    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime(timezone=False), nullable=False)
    )
    updated_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime(timezone=False), nullable=False)
    )


class Person(SQLModel, table=True):
    __tablename__ = "persons"

    id: str = Field(default_factory=new_uuid, primary_key=True, max_length=36)
    tree_id: str = Field(index=True, max_length=36)
    gedcom_id: Optional[str] = Field(default=None, index=True, max_length=32)

    # Name
    first_name: str = Field(default="Unknown", max_length=100)
    middle_name: Optional[str] = Field(default=None, max_length=100)
    last_name: str = Field(default="Unknown", max_length=100)
    maiden_name: Optional[str] = Field(default=None, max_length=100)
    gender: Optional[str] = Field(default=None, max_length=1)

    # Birth
    birth_date: Optional[date] = None
    birth_date_original: Optional[str] = Field(default=None, max_length=100)
    birth_time: Optional[time] = None
    birth_place: Optional[str] = Field(default=None, max_length=255)
    birth_latitude: Optional[float] = None
    birth_longitude: Optional[float] = None

    # Baptism
    baptism_date: Optional[date] = None
    baptism_date_original: Optional[str] = Field(default=None, max_length=100)
    baptism_time: Optional[time] = None
    baptism_place: Optional[str] = Field(default=None, max_length=255)
    baptism_latitude: Optional[float] = None
    baptism_longitude: Optional[float] = None

    # Death
    death_date: Optional[date] = None
    death_date_original: Optional[str] = Field(default=None, max_length=100)
    death_time: Optional[time] = None
    death_place: Optional[str] = Field(default=None, max_length=255)
    death_latitude: Optional[float] = None
    death_longitude: Optional[float] = None

    # Parentage (Person ids in the same tree)
    father_id: Optional[str] = Field(default=None, max_length=36)
    mother_id: Optional[str] = Field(default=None, max_length=36)

    occupation: Optional[str] = Field(default=None, max_length=255)
    notes: Optional[str] = None

    # Timestamps carried by the GEDCOM record (_CREA / CHAN)
    created_time: Optional[datetime] = Field(default=None, sa_column=Column(DateTime(timezone=False)))
    changed_time: Optional[datetime] = Field(default=None, sa_column=Column(DateTime(timezone=False)))

    # Sosa-Stradonitz number as a decimal string (unbounded)
    sosa: Optional[str] = None

    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime(timezone=False), nullable=False)
    )
    updated_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime(timezone=False), nullable=False)
    )


class Family(SQLModel, table=True):
    __tablename__ = "families"

    id: str = Field(default_factory=new_uuid, primary_key=True, max_length=36)
    tree_id: str = Field(index=True, max_length=36)

    husband_id: Optional[str] = Field(default=None, max_length=36)
    wife_id: Optional[str] = Field(default=None, max_length=36)

    marriage_date: Optional[date] = None
    marriage_date_original: Optional[str] = Field(default=None, max_length=100)
    marriage_time: Optional[time] = None
    marriage_place: Optional[str] = Field(default=None, max_length=255)
    marriage_latitude: Optional[float] = None
    marriage_longitude: Optional[float] = None

    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime(timezone=False), nullable=False)
    )


class Source(SQLModel, table=True):
    __tablename__ = "sources"

    id: str = Field(default_factory=new_uuid, primary_key=True, max_length=36)
    tree_id: str = Field(index=True, max_length=36)
    gedcom_id: Optional[str] = Field(default=None, index=True, max_length=32)

    title: str = Field(default="Untitled Source", max_length=255)
    author: Optional[str] = Field(default=None, max_length=255)
    publication: Optional[str] = None

    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime(timezone=False), nullable=False)
    )


class MediaObject(SQLModel, table=True):
    __tablename__ = "media_objects"

    id: str = Field(default_factory=new_uuid, primary_key=True, max_length=36)
    tree_id: str = Field(index=True, max_length=36)
    gedcom_id: Optional[str] = Field(default=None, index=True, max_length=32)

    file_name: str = Field(max_length=255)
    file_path: Optional[str] = Field(default=None, max_length=500)
    media_type: str = Field(default=MEDIA_TYPE_PHOTO, max_length=50)
    title: Optional[str] = Field(default=None, max_length=255)

    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime(timezone=False), nullable=False)
    )


class PersonMedia(SQLModel, table=True):
    __tablename__ = "person_media"

    person_id: str = Field(primary_key=True, foreign_key="persons.id", max_length=36)
    media_id: str = Field(primary_key=True, foreign_key="media_objects.id", max_length=36)


class PersonSource(SQLModel, table=True):
    __tablename__ = "person_sources"

    person_id: str = Field(primary_key=True, foreign_key="persons.id", max_length=36)
    source_id: str = Field(primary_key=True, foreign_key="sources.id", max_length=36)
