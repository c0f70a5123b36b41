from __future__ import annotations

from collections.abc import Callable
from datetime import date
from enum import Enum

from .core import Weekday, doomsday, st_mag_53, svm_86, tomohiko_sakamoto, zeller
from .shakuntala import shakuntala_devi_weekday


class Algorithm(str, Enum):
    ZELLER = "zeller"
    SAKAMOTO = "sakamoto"
    DOOMSDAY = "doomsday"
    SHAKUNTALA_DEVI = "shakuntala_devi"
    ST_MAG_53 = "st_mag_53"
    SVM_86 = "svm_86"


ALGORITHMS: dict[Algorithm, Callable[[date], Weekday]] = {
    Algorithm.ZELLER: zeller,
    Algorithm.SAKAMOTO: tomohiko_sakamoto,
    Algorithm.DOOMSDAY: doomsday,
    Algorithm.SHAKUNTALA_DEVI: shakuntala_devi_weekday,
    Algorithm.ST_MAG_53: st_mag_53,
    Algorithm.SVM_86: svm_86,
}


def weekday_for(dt: date, algorithm: Algorithm | str = Algorithm.SHAKUNTALA_DEVI) -> Weekday:
    """Return the weekday of ``dt`` computed with ``algorithm``.

    ``algorithm`` may be an :class:`Algorithm` or its string value; an
    unknown name raises ``ValueError``.
    """

    return ALGORITHMS[Algorithm(algorithm)](dt)
