from .uuid_factory import is_pointer, new_uuid, normalize_gedcom_id

__all__ = [
    "is_pointer",
    "new_uuid",
    "normalize_gedcom_id",
]
