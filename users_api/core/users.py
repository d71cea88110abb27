"""Collection Logic — pure functions over the in-memory user list.

Invariants:
    - Functions never perform IO; callers load before and save after
    - Lookups are a linear scan returning the FIRST record whose id matches
    - next_user_id() == len(users) + 1: after a delete this can collide with
      a surviving record's id, and lookups then resolve to the earlier record
    - Mutating helpers change the list they are given in place

Design Decisions:
    - Length-based ids kept for compatibility with existing data files;
      a persisted counter would change the file format
    - create_user spreads the payload over the assigned id, so a client-sent
      "id" wins in the stored record (the response still reports the assigned id)
"""

from typing import Any, Mapping

from users_api.core.domain_types import (
    UPDATABLE_FIELDS, UserCollection, UserId, UserRecord,
)


def parse_user_id(raw: str) -> UserId | None:
    """Parse a path segment into an id. Non-numeric segments match nothing."""
    segment = raw.strip()
    # ASCII digits only: int() also takes "1_0" and non-ASCII digits
    digits = segment[1:] if segment[:1] in ("+", "-") else segment
    if not (digits.isascii() and digits.isdigit()):
        return None
    return UserId(int(segment))


def _matches(record: UserRecord, user_id: int) -> bool:
    value = record.get("id")
    # bool is an int subclass; True must not match id 1
    return not isinstance(value, bool) and value == user_id


def find_user_index(users: UserCollection, user_id: int | None) -> int | None:
    """Index of the first record with the given id, or None."""
    if user_id is None:
        return None
    for index, record in enumerate(users):
        if _matches(record, user_id):
            return index
    return None


def find_user(users: UserCollection, user_id: int | None) -> UserRecord | None:
    index = find_user_index(users, user_id)
    return None if index is None else users[index]


def next_user_id(users: UserCollection) -> UserId:
    return UserId(len(users) + 1)


def create_user(
    users: UserCollection, payload: Mapping[str, Any],
) -> tuple[UserId, UserRecord]:
    """Append a new record built from an unvalidated payload."""
    user_id = next_user_id(users)
    record: UserRecord = {"id": user_id, **payload}
    users.append(record)
    return user_id, record


def apply_update(
    users: UserCollection, index: int, fields: Mapping[str, Any],
) -> UserRecord:
    """Overwrite the updatable fields of users[index], keeping id and extras.

    A field absent from ``fields`` (only city can be) is dropped from the record.
    """
    updated = dict(users[index])
    for name in UPDATABLE_FIELDS:
        if fields.get(name) is None:
            updated.pop(name, None)
        else:
            updated[name] = fields[name]
    users[index] = updated
    return updated


def remove_user(users: UserCollection, index: int) -> UserRecord:
    return users.pop(index)
