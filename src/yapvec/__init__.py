# -*- coding: utf-8 -*-
import logging

try:  # Python >= 3.8
    from importlib.metadata import PackageNotFoundError, version
except ModuleNotFoundError:  # pragma: no cover - for Python < 3.8
    from importlib_metadata import PackageNotFoundError, version

from yapvec.errors import (
    YapVecError,
    ZeroLengthVector,
    DivideByZero,
    DegenerateRotation,
    InvalidRotationMatrix,
)
from yapvec.vector import (
    Vector3,
    vect,
    add,
    sub,
    subtract,
    scale,
    divide,
    length,
    normalize,
    dot,
    cross,
    getAngle,
    isParallel,
    isPerpendicular,
    isEqual,
    distanceToPoint,
    distanceToLine,
    distanceToLineSegment,
    distanceToPlane,
    projectToLine,
    projectToPlane,
)
from yapvec.xform import Matrix, Translation
from yapvec.rotation import Rotation, multiply, multVec, invert, isSame, slerp

## the library stays quiet unless the host application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

try:
    __version__ = version("yapVec")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"
