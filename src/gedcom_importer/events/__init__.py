from .event import (
    BAPTISM_TAGS,
    BIRTH_TAGS,
    DEATH_TAGS,
    MARRIAGE_TAGS,
    EventData,
    extract_event,
    extract_event_from_node,
    parse_coordinate,
)

__all__ = [
    "BAPTISM_TAGS",
    "BIRTH_TAGS",
    "DEATH_TAGS",
    "MARRIAGE_TAGS",
    "EventData",
    "extract_event",
    "extract_event_from_node",
    "parse_coordinate",
]
