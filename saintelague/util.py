'''Various utility functions for other modules of saintelague.

There should normally be no need to use these functions directly.
'''

import random
from typing import Any, List, Optional, Sequence


def select_n_random(candidates: Sequence[Any],
                    n: int = 1,
                    rng: Optional[random.Random] = None,
                    ) -> List[Any]:
    '''Select candidates purely randomly, without replacement.

    Every candidate has the same probability of being selected, and so does
    every subset of size *n*.

    :param candidates: Candidates to select from.
    :param n: Number of candidates to be selected. Clamped to the available
        range.
    :param rng: Random generator to draw from. A fresh unseeded one is used
        if not given.
    '''
    if rng is None:
        rng = random.Random()
    n = max(0, min(n, len(candidates)))
    return rng.sample(list(candidates), n)
