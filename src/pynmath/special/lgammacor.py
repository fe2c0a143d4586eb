from ..utils.chebyshev import chebyshev_eval
from ..utils.diagnostics import ML_WARNING, ML_WARN_return_NAN, MathError
from ..utils.ieee import ieee754

ALGMCS = [
    .1666389480451863247205729650822e+0,
    -.1384948176067563840732986059135e-4,
    .9810825646924729426157171547487e-8,
    -.1809129475572494194263306266719e-10,
    .6221098041892605227126015543416e-13,
    -.3399615005417721944303330599666e-15,
    .2683181998482698748957538846666e-17,
    -.2868042435334643284144622399999e-19,
    .3962837061046434803679306666666e-21,
    -.6831888753985766870111999999999e-23,
    .1429227355942498147573333333333e-24,
    -.3547598158101070547199999999999e-26,
    .1025680058010470912000000000000e-27,
    -.3401102254316748799999999999999e-29,
    .1276642195630062933333333333333e-30
]

NALGM = 5
XBIG = 94906265.62425156
XMAX = 3.745194030963158e306


@ieee754(1)
def lgammacor(x):
    '''
    Compute the log gamma correction factor for x >= 10 so that
    log(gamma(x)) = .5*log(2*pi) + (x-.5)*log(x) -x + lgammacor(x)
    [ lgammacor(x) is called	Del(x)	in other contexts (e.g. dcdflib)]

    Adapted from the RMath function written by Ross Ihaka

    '''
    if x < 10:
        return ML_WARN_return_NAN("lgammacor")
    elif x >= XMAX:
        ML_WARNING(MathError.UNDERFLOW, "lgammacor")
        # allow to underflow below
    elif x < XBIG:
        tmp = 10 / x
        return chebyshev_eval(tmp * tmp * 2 - 1, ALGMCS, NALGM) / x
    return 1 / (x * 12)
