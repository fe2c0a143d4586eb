import math
from .lgammafn import lgammafn
from .log1pmx import logcf, log1pmx
from ..utils.ieee import ieee754

EULERS_CONST = 0.5772156649015328606065120900824024

# coeffs[i] holds (zeta(i+2)-1)/(i+2) , i = 0:(N-1), N = 40
LGAMMA1P_COEFFS = [
    0.3224670334241132182362075833230126e-0,  # = (zeta(2)-1)/2
    0.6735230105319809513324605383715000e-1,  # = (zeta(3)-1)/3
    0.2058080842778454787900092413529198e-1,
    0.7385551028673985266273097291406834e-2,
    0.2890510330741523285752988298486755e-2,
    0.1192753911703260977113935692828109e-2,
    0.5096695247430424223356548135815582e-3,
    0.2231547584535793797614188036013401e-3,
    0.9945751278180853371459589003190170e-4,
    0.4492623673813314170020750240635786e-4,
    0.2050721277567069155316650397830591e-4,
    0.9439488275268395903987425104415055e-5,
    0.4374866789907487804181793223952411e-5,
    0.2039215753801366236781900709670839e-5,
    0.9551412130407419832857179772951265e-6,
    0.4492469198764566043294290331193655e-6,
    0.2120718480555466586923135901077628e-6,
    0.1004322482396809960872083050053344e-6,
    0.4769810169363980565760193417246730e-7,
    0.2271109460894316491031998116062124e-7,
    0.1083865921489695409107491757968159e-7,
    0.5183475041970046655121248647057669e-8,
    0.2483674543802478317185008663991718e-8,
    0.1192140140586091207442548202774640e-8,
    0.5731367241678862013330194857961011e-9,
    0.2758522714757910209632162708371890e-9,
    0.1329045294866883551519432506484101e-9,
    0.6410796154680064347659883542012890e-10,
    0.3095485149098221476163426449493590e-10,
    0.1495854390286566093604009768939813e-10,
    0.7234142558895818131003066000227470e-11,
    0.3500955007048935734939802522045543e-11,
    0.1695322008130045993815101101829393e-11,
    0.8213920513522689009810262209059913e-12,
    0.3981614541011004306011220024219460e-12,
    0.1930886082508432640018098520180564e-12,
    0.9368027453286649498081155306346660e-13,
    0.4546974010436047648519283045542410e-13,
    0.2207790765567016497862271620046014e-13,
    0.1072376212093208286432290009069466e-13,
]

# zeta(N+2)-1
LGAMMA1P_TAIL = 0.2273736845824652515226821577978691e-12


@ieee754(1)
def lgamma1p(a):
    '''
    Compute  log(gamma(a+1))  accurately also for small a (0 < a < 0.5).

    Abramowitz & Stegun 6.1.33 : for |x| < 2,
    <==> log(gamma(1+x)) = -(log(1+x) - x) - gamma*x + x^2 * \\sum_{n=0}^\\infty c_n (-x)^n
    where c_n := (Zeta(n+2) - 1)/(n+2)  = coeffs[n]

    The series sum is accelerated with logcf() for its tail.

    '''
    if math.fabs(a) >= 0.5:
        return lgammafn(a + 1)

    N = len(LGAMMA1P_COEFFS)
    tol_logcf = 1e-14

    lgam = LGAMMA1P_TAIL * logcf(-a / 2, N + 2, 1, tol_logcf)
    for i in range(N - 1, -1, -1):
        lgam = LGAMMA1P_COEFFS[i] - a * lgam

    return (a * lgam - EULERS_CONST) * a - log1pmx(a)
