"""Random seeding."""

import random
from typing import Optional

import numpy as np


def set_seed(seed: Optional[int]) -> None:
    """Seed every generator rollouts draw from. None leaves them unseeded."""
    if seed is None:
        return
    random.seed(seed)
    np.random.seed(seed)
