"""Strongly typed identifiers for Showcase domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Subject of the identity provider's token
UserId = NewType("UserId", UUID)
VoteId = NewType("VoteId", UUID)

# Submissions are keyed by the identifier of the external showcase entry
# (e.g. the slug of a hosted pen), not by a generated UUID.
SubmissionId = NewType("SubmissionId", str)
