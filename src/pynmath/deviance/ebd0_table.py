import numpy as np

# Row i holds log(f/1024) with f = round(1024 / (0.5 + i/256)), i = 0..128,
# split into four float32 parts so that x * part is exact for "nice" x.
BD0_SCALE = np.array([
    [0.6931472, -1.9046542e-9, -8.783184e-17, 3.0618407e-24],  # log(2048/1024.)
    [0.68530405, -4.2578264e-8, -1.1723105e-15, 6.2033926e-23],  # log(2032/1024.)
    [0.6773988, 2.274189e-8, 1.441192e-15, 7.0463845e-23],  # log(2016/1024.)
    [0.6699306, -4.8293856e-8, -8.6647955e-16, 7.049558e-24],  # log(2001/1024.)
    [0.6624061, -4.7916025e-8, -2.1615082e-15, 7.0929684e-23],  # log(1986/1024.)
    [0.6548245, 6.2377152e-9, 1.18067e-16, 6.6603235e-25],  # log(1971/1024.)
    [0.6471851, -4.220867e-8, -1.3817589e-15, -1.11599324e-23],  # log(1956/1024.)
    [0.6400019, -4.97917e-8, 4.887014e-16, 1.6847466e-23],  # log(1942/1024.)
    [0.6327667, -5.4061772e-8, -2.7224545e-15, -2.907078e-23],  # log(1928/1024.)
    [0.62495613, 3.2859354e-8, 1.201673e-16, -8.668233e-24],  # log(1913/1024.)
    [0.61813736, -6.4061895e-11, 3.550581e-18, -3.6236794e-25],  # log(1900/1024.)
    [0.6107416, 4.2298538e-8, 1.5481433e-15, -5.446353e-23],  # log(1886/1024.)
    [0.6032908, 5.5158175e-8, 2.1193637e-15, 1.2471098e-22],  # log(1872/1024.)
    [0.5963222, 3.2813539e-9, -1.403347e-16, 5.544062e-24],  # log(1859/1024.)
    [0.58930457, 4.3079986e-8, -3.2446652e-15, -2.5697824e-23],  # log(1846/1024.)
    [0.5822375, -3.9830674e-8, 2.9387906e-15, 1.612443e-22],  # log(1833/1024.)
    [0.57512, 2.242384e-9, -2.2045164e-17, 4.0785438e-25],  # log(1820/1024.)
    [0.5685047, 4.4228706e-8, 2.7879957e-16, -9.741709e-24],  # log(1808/1024.)
    [0.5618454, 2.1471614e-8, 1.3374919e-15, -2.3269223e-23],  # log(1796/1024.)
    [0.5545808, 4.577835e-9, 2.633146e-16, 2.0709959e-23],  # log(1783/1024.)
    [0.54782784, -7.668e-9, 6.1990953e-16, 6.341979e-24],  # log(1771/1024.)
    [0.541029, -3.730232e-8, -3.3801781e-15, 1.4469198e-22],  # log(1759/1024.)
    [0.5347557, 4.382892e-8, -8.601821e-16, -8.7759506e-24],  # log(1748/1024.)
    [0.5278671, 1.0839715e-8, -4.480281e-16, 3.8840996e-23],  # log(1736/1024.)
    [0.5215105, 4.2031594e-8, 1.21101e-15, -2.3206745e-23],  # log(1725/1024.)
    [0.5145297, -1.2322941e-8, 2.8200845e-16, 1.8800266e-23],  # log(1713/1024.)
    [0.5080875, -1.2297127e-8, -4.2958356e-16, -1.8036626e-23],  # log(1702/1024.)
    [0.5016035, 5.914538e-8, 1.2728561e-15, -5.8240944e-23],  # log(1691/1024.)
    [0.49507725, 1.4409851e-8, -6.38191e-17, -3.5005094e-25],  # log(1680/1024.)
    [0.48910707, 2.7457986e-8, -1.4470419e-15, 4.211867e-23],  # log(1670/1024.)
    [0.48249847, 1.7622455e-8, 4.1286752e-16, 2.6082692e-23],  # log(1659/1024.)
    [0.47645253, -1.24702435e-8, -9.162194e-17, 3.7657825e-24],  # log(1649/1024.)
    [0.46975946, -5.450354e-9, -4.304847e-16, 2.0747103e-25],  # log(1638/1024.)
    [0.46363574, -1.7013047e-9, 7.601623e-18, -2.0415879e-25],  # log(1628/1024.)
    [0.4574743, 6.9436845e-10, -2.546131e-17, 5.5412533e-25],  # log(1618/1024.)
    [0.45127463, 1.0731865e-8, 6.374e-16, 3.9015473e-23],  # log(1608/1024.)
    [0.4450363, 2.8650657e-8, -9.155353e-16, -4.7365878e-23],  # log(1598/1024.)
    [0.43938833, 2.6186132e-8, 1.3619602e-15, -5.2672795e-23],  # log(1589/1024.)
    [0.4330752, 1.9065734e-8, 1.0143192e-15, 1.0145671e-22],  # log(1579/1024.)
    [0.4273591, -1.1413594e-8, 1.3242045e-16, -1.0240056e-23],  # log(1570/1024.)
    [0.4209693, -1.2778509e-8, 6.1435257e-16, 1.4192422e-23],  # log(1560/1024.)
    [0.41518337, -7.767916e-9, 5.955443e-16, 2.732668e-23],  # log(1551/1024.)
    [0.40936375, 1.880755e-9, 1.9153331e-16, -5.6208063e-24],  # log(1542/1024.)
    [0.4035101, -2.0416604e-8, -2.93405e-16, 1.894347e-24],  # log(1533/1024.)
    [0.39762193, 1.0016001e-9, 2.2863242e-17, 9.458134e-25],  # log(1524/1024.)
    [0.3916989, 1.5459097e-8, 1.0962823e-15, 3.1083022e-23],  # log(1515/1024.)
    [0.3864044, -2.0764124e-9, 1.5073465e-16, 7.4124495e-24],  # log(1507/1024.)
    [0.38041437, -8.244395e-9, 1.4866225e-16, -3.9272927e-24],  # log(1498/1024.)
    [0.37438822, 9.15853e-9, 5.656919e-16, 3.4213475e-23],  # log(1489/1024.)
    [0.36900103, -2.2253591e-8, 6.2314054e-16, -2.1564751e-23],  # log(1481/1024.)
    [0.36358464, -2.6778729e-8, -9.943908e-16, -4.7049297e-24],  # log(1473/1024.)
    [0.3574559, -2.0330361e-8, -1.5794492e-15, 6.318678e-23],  # log(1464/1024.)
    [0.3519764, 2.8503859e-8, -9.566435e-16, -6.409595e-24],  # log(1456/1024.)
    [0.34646678, -1.2362653e-8, -6.003368e-16, -2.8609015e-24],  # log(1448/1024.)
    [0.3409266, -6.1104133e-10, 1.7467136e-17, 1.9962587e-25],  # log(1440/1024.)
    [0.33535552, 2.1672726e-8, -1.0918773e-15, -3.0475748e-23],  # log(1432/1024.)
    [0.3304553, -1.608884e-8, -3.833435e-16, -7.683742e-24],  # log(1425/1024.)
    [0.3248254, 2.8016704e-8, -2.0725721e-16, 1.3160778e-23],  # log(1417/1024.)
    [0.31916368, 2.622263e-8, -1.3995223e-15, 8.599884e-23],  # log(1409/1024.)
    [0.31418324, 2.6826626e-8, -9.792556e-16, 2.2954961e-23],  # log(1402/1024.)
    [0.30846077, 1.3683509e-8, 5.591995e-16, -1.19387014e-23],  # log(1394/1024.)
    [0.30342662, -8.629042e-9, -5.222554e-16, 3.2287708e-23],  # log(1387/1024.)
    [0.29836696, 8.688424e-9, 2.7641168e-16, -1.0171859e-23],  # log(1380/1024.)
    [0.292553, -4.9163145e-9, 2.5622847e-16, -2.6341576e-23],  # log(1372/1024.)
    [0.28743792, -1.3782396e-8, 7.2903935e-16, -4.431978e-24],  # log(1365/1024.)
    [0.28229648, 2.3770866e-8, 6.4492284e-16, 3.417537e-23],  # log(1358/1024.)
    [0.27712852, 1.4733029e-8, 6.793364e-16, 3.593898e-24],  # log(1351/1024.)
    [0.27193373, -1.893332e-8, 7.779394e-16, 2.5919724e-23],  # log(1344/1024.)
    [0.26671177, 1.4300387e-11, -7.458877e-19, 4.2474188e-26],  # log(1337/1024.)
    [0.262214, 7.802219e-9, 5.022431e-16, -2.4063175e-23],  # log(1331/1024.)
    [0.2569409, 2.961805e-8, 7.279528e-16, 2.6385561e-23],  # log(1324/1024.)
    [0.2516399, -6.447878e-9, 4.1220281e-16, 7.427559e-24],  # log(1317/1024.)
    [0.24707368, -1.998183e-9, -1.0909758e-16, 6.236552e-24],  # log(1311/1024.)
    [0.24171993, 5.523086e-9, -2.6865476e-16, -2.764496e-24],  # log(1304/1024.)
    [0.23710808, 1.0085374e-8, -4.775627e-16, 2.3306206e-23],  # log(1298/1024.)
    [0.2317006, -1.3946384e-8, 1.0970921e-17, 3.2299094e-25],  # log(1291/1024.)
    [0.2270422, -6.451285e-9, -4.2529948e-16, -1.0260255e-23],  # log(1285/1024.)
    [0.22236198, 1.4110645e-8, 6.025569e-16, 1.938518e-23],  # log(1279/1024.)
    [0.2176598, -8.286783e-9, 5.232364e-16, 5.0784435e-23],  # log(1273/1024.)
    [0.2121458, -8.254219e-9, 3.2555531e-16, 1.57143e-23],  # log(1266/1024.)
    [0.2073952, -1.614928e-9, 2.1131593e-17, 1.4275617e-24],  # log(1260/1024.)
    [0.2026219, 8.59764e-9, -3.380462e-16, 2.5623236e-24],  # log(1254/1024.)
    [0.19782573, 1.3482966e-8, -3.202457e-16, -2.5712252e-23],  # log(1248/1024.)
    [0.19300646, 9.95686e-10, 9.0016746e-17, -3.7547977e-24],  # log(1242/1024.)
    [0.18897256, 4.241536e-9, 3.8086815e-16, -2.1147403e-23],  # log(1237/1024.)
    [0.18411031, 6.931055e-9, -3.4784859e-16, 2.4665943e-23],  # log(1231/1024.)
    [0.17922431, 5.0739235e-9, 3.222133e-16, -1.0379009e-23],  # log(1225/1024.)
    [0.17431432, 3.7943853e-9, 3.190067e-16, 2.0292715e-23],  # log(1219/1024.)
    [0.17020416, 3.4223344e-9, -1.8846417e-16, 1.1415315e-23],  # log(1214/1024.)
    [0.16524959, -1.3210039e-8, -2.3213954e-16, 3.0430542e-24],  # log(1208/1024.)
    [0.1602703, 6.007922e-9, -7.521048e-17, -1.2649106e-25],  # log(1202/1024.)
    [0.15610191, -1.2301536e-8, 3.0175618e-16, -8.6338065e-24],  # log(1197/1024.)
    [0.15191606, -1.4845572e-8, -3.2658303e-16, -1.5268152e-23],  # log(1192/1024.)
    [0.14686978, -4.6748996e-9, -4.2942913e-16, 1.328296e-23],  # log(1186/1024.)
    [0.142645, 9.186472e-9, -8.049373e-16, 1.4379988e-23],  # log(1181/1024.)
    [0.13840231, 9.865117e-9, -8.8373065e-16, 7.295325e-24],  # log(1176/1024.)
    [0.13328722, 9.990351e-10, 3.3169466e-17, 2.735144e-24],  # log(1170/1024.)
    [0.12900457, -7.4612085e-9, -6.212113e-16, 1.8551873e-24],  # log(1165/1024.)
    [0.12470348, -3.2924463e-9, -7.40412e-17, 1.3246956e-24],  # log(1160/1024.)
    [0.120383814, 3.3791991e-9, 1.6214982e-16, -6.0007067e-24],  # log(1155/1024.)
    [0.116045415, 3.5638392e-10, -7.35422e-18, 7.7943124e-26],  # log(1150/1024.)
    [0.11168811, 3.136766e-9, -8.994406e-19, -7.9209376e-26],  # log(1145/1024.)
    [0.10731174, -4.728528e-9, -4.297634e-16, 5.3511433e-24],  # log(1140/1024.)
    [0.10291612, 2.8332008e-9, 4.9257428e-17, 2.7944368e-24],  # log(1135/1024.)
    [0.0985011, 4.970725e-9, 4.1305128e-16, 6.3134496e-25],  # log(1130/1024.)
    [0.094066516, -6.525851e-9, -1.3492817e-16, -9.07965e-24],  # log(1125/1024.)
    [0.089612156, 2.5369618e-9, 1.6110665e-16, -5.1895045e-24],  # log(1120/1024.)
    [0.08603434, -5.3047957e-9, 5.1275755e-17, 1.4636155e-24],  # log(1116/1024.)
    [0.08154398, 2.0112156e-9, 8.0657693e-17, -3.015032e-24],  # log(1111/1024.)
    [0.07703337, 5.749566e-9, -2.503851e-16, -1.8461431e-23],  # log(1106/1024.)
    [0.07250233, 1.1776626e-9, -3.525477e-17, 1.3164078e-24],  # log(1101/1024.)
    [0.06886266, -7.0435453e-9, 2.497124e-16, 1.06868825e-23],  # log(1097/1024.)
    [0.06429435, -2.422082e-9, -2.0555896e-16, 8.602908e-24],  # log(1092/1024.)
    [0.06062462, 7.905943e-12, -8.2704433e-19, -2.3533821e-26],  # log(1088/1024.)
    [0.056018442, -5.1397453e-10, -3.8116516e-17, 1.9072195e-24],  # log(1083/1024.)
    [0.052318163, -3.5574326e-9, 9.191156e-17, -5.321464e-24],  # log(1079/1024.)
    [0.04767347, -1.8026349e-9, 1.0329634e-16, -2.228357e-24],  # log(1074/1024.)
    [0.043942124, -1.7950057e-9, -5.3817403e-17, -1.3996197e-24],  # log(1070/1024.)
    [0.0401968, 3.845193e-10, -2.4485453e-17, -7.386769e-26],  # log(1066/1024.)
    [0.035495333, -3.5901654e-10, -2.0732078e-17, -2.4120972e-26],  # log(1061/1024.)
    [0.03171818, 6.8723505e-10, -6.430478e-18, 1.3508692e-25],  # log(1057/1024.)
    [0.027926706, 7.5687734e-10, -4.220316e-17, 2.5347606e-24],  # log(1053/1024.)
    [0.024120804, -1.1255707e-9, 4.897006e-17, 1.4172215e-24],  # log(1049/1024.)
    [0.019342963, 1.906861e-10, -1.0635946e-17, -5.3004895e-25],  # log(1044/1024.)
    [0.015504187, -4.3701048e-10, 6.6110615e-18, 2.5398087e-25],  # log(1040/1024.)
    [0.011650616, 9.16889e-10, -1.5848698e-17, -1.3504916e-24],  # log(1036/1024.)
    [0.0077821407, -3.0465774e-10, 7.793436e-18, 4.6601e-25],  # log(1032/1024.)
    [0.0038986406, -2.1324678e-10, 1.2541658e-19, 8.7450354e-27],  # log(1028/1024.)
    [0.0, 0.0, 0.0, 0.0],  # log(1024/1024) = log(1) = 0
], dtype=np.float32)
