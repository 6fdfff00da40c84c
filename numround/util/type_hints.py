"""This module provides PEP 484-style type hints for ``numround`` constructs.
"""
from typing import List, Tuple, Union

import numpy as np
import numpy.typing
import pandas as pd


#######################
####    SCALARS    ####
#######################


# python scalars are accepted alongside their numpy equivalents
real = Union[
    int,
    float,
    np.integer,
    np.floating
]


dtype_like = Union[
    type,
    str,
    np.dtype,
    pd.api.extensions.ExtensionDtype
]


#########################
####    ITERABLES    ####
#########################


array_like = numpy.typing.ArrayLike


list_like = Union[
    List,
    Tuple,
    array_like
]


numeric = Union[
    real,
    np.ndarray,
    pd.Series,
    List,
    Tuple
]
