from .gammafn import gammafn
from .lgammafn import lgammafn, lgammafn_sign
from .lgammacor import lgammacor
from .lbeta import lbeta
from .log1pmx import log1pmx, logcf
from .lgamma1p import lgamma1p

__all__ = ["gammafn", "lgammafn", "lgammafn_sign", "lgammacor", "lbeta",
           "log1pmx", "lgamma1p", "logcf"]
