from typing import Sequence

# command arguments, resource ids and the like
StringSequence = Sequence[str]
