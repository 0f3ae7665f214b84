"""Type hints used in TopCut."""

from typing import Any, Callable, Dict, List, Literal, Optional

# Stage names accepted when recording a bracket result
BracketRound = Literal["quarterfinal", "semifinal", "final"]

# A serialized tournament document, or a partial update of one
Document = Dict[str, Any]
MaybeDocument = Optional[Document]

# Opponent ids in the order they were faced
MatchHistory = List[str]

# Produces ids for newly created players and Swiss matches
IdFactory = Callable[[], str]
