"""Domain Types — names for the primitives that flow through the collection logic.

Invariants:
    - UserId is a positive int; ids are NOT guaranteed unique (see core/users.py)
    - UserRecord is a plain JSON object: known fields plus whatever POST accepted

Design Decisions:
    - NewType/alias over dataclasses: records round-trip through json untouched,
      including fields the service never heard of
"""

from typing import Any, NewType

UserId = NewType("UserId", int)

UserRecord = dict[str, Any]
UserCollection = list[UserRecord]

# Fields an update overwrites; everything else on the record is preserved.
UPDATABLE_FIELDS = ("firstName", "secondName", "age", "city")
