"""
Step calibration data.

For every supported step count n the (diameter, distance) pairs, in the
normalised unit where the start diameter is 1000, that split the overlap
ratio into n equal increments while the union area of the pair stays equal
to that of the two disjoint start circles. Computed offline; do not edit.
"""

RAW_CALIBRATION_DATA: dict[int, tuple[tuple[int, int], ...]] = {
    2: (
        (1000, 1000), (1225, 325), (1414, 0),
    ),
    3: (
        (1000, 1000), (1155, 467), (1291, 204), (1414, 0),
    ),
    4: (
        (1000, 1000), (1118, 550), (1225, 325), (1323, 149), (1414, 0),
    ),
    5: (
        (1000, 1000), (1095, 606), (1183, 406), (1265, 250), (1342, 117), (1414, 0),
    ),
    6: (
        (1000, 1000), (1080, 647), (1155, 467), (1225, 325), (1291, 204), (1354, 97),
        (1414, 0),
    ),
    7: (
        (1000, 1000), (1069, 678), (1134, 513), (1195, 382), (1254, 271), (1309, 172),
        (1363, 82), (1414, 0),
    ),
    8: (
        (1000, 1000), (1061, 704), (1118, 550), (1173, 428), (1225, 325), (1275, 232),
        (1323, 149), (1369, 72), (1414, 0),
    ),
    9: (
        (1000, 1000), (1054, 724), (1106, 580), (1155, 467), (1202, 369), (1247, 282),
        (1291, 204), (1333, 131), (1374, 64), (1414, 0),
    ),
    10: (
        (1000, 1000), (1049, 742), (1095, 606), (1140, 498), (1183, 406), (1225, 325),
        (1265, 250), (1304, 181), (1342, 117), (1379, 57), (1414, 0),
    ),
    11: (
        (1000, 1000), (1044, 756), (1087, 628), (1128, 526), (1168, 439), (1206, 361),
        (1243, 290), (1279, 224), (1314, 163), (1348, 106), (1382, 52), (1414, 0),
    ),
    12: (
        (1000, 1000), (1041, 769), (1080, 647), (1118, 550), (1155, 467), (1190, 392),
        (1225, 325), (1258, 262), (1291, 204), (1323, 149), (1354, 97), (1384, 47),
        (1414, 0),
    ),
    13: (
        (1000, 1000), (1038, 780), (1074, 664), (1110, 571), (1143, 491), (1177, 420),
        (1209, 355), (1240, 295), (1271, 239), (1301, 186), (1330, 136), (1359, 89),
        (1387, 44), (1414, 0),
    ),
    14: (
        (1000, 1000), (1035, 790), (1069, 678), (1102, 590), (1134, 513), (1165, 444),
        (1195, 382), (1225, 325), (1254, 271), (1282, 220), (1309, 172), (1336, 126),
        (1363, 82), (1389, 40), (1414, 0),
    ),
    15: (
        (1000, 1000), (1033, 799), (1065, 692), (1095, 606), (1125, 532), (1155, 467),
        (1183, 406), (1211, 351), (1238, 299), (1265, 250), (1291, 204), (1317, 159),
        (1342, 117), (1366, 77), (1390, 38), (1414, 0),
    ),
    16: (
        (1000, 1000), (1031, 807), (1061, 704), (1090, 621), (1118, 550), (1146, 486),
        (1173, 428), (1199, 375), (1225, 325), (1250, 277), (1275, 232), (1299, 190),
        (1323, 149), (1346, 109), (1369, 72), (1392, 35), (1414, 0),
    ),
    17: (
        (1000, 1000), (1029, 814), (1057, 714), (1085, 635), (1112, 566), (1138, 505),
        (1163, 448), (1188, 396), (1213, 348), (1237, 302), (1260, 258), (1283, 217),
        (1306, 177), (1328, 139), (1350, 103), (1372, 67), (1393, 33), (1414, 0),
    ),
    18: (
        (1000, 1000), (1027, 820), (1054, 724), (1080, 647), (1106, 580), (1131, 521),
        (1155, 467), (1178, 416), (1202, 369), (1225, 325), (1247, 282), (1269, 242),
        (1291, 204), (1312, 167), (1333, 131), (1354, 97), (1374, 64), (1394, 31),
        (1414, 0),
    ),
    19: (
        (1000, 1000), (1026, 826), (1051, 733), (1076, 658), (1100, 594), (1124, 536),
        (1147, 483), (1170, 434), (1192, 388), (1214, 345), (1235, 304), (1256, 265),
        (1277, 228), (1298, 192), (1318, 157), (1338, 124), (1357, 91), (1376, 60),
        (1395, 30), (1414, 0),
    ),
    20: (
        (1000, 1000), (1025, 832), (1049, 742), (1072, 669), (1095, 606), (1118, 550),
        (1140, 498), (1162, 451), (1183, 406), (1204, 364), (1225, 325), (1245, 286),
        (1265, 250), (1284, 215), (1304, 181), (1323, 149), (1342, 117), (1360, 87),
        (1379, 57), (1396, 28), (1414, 0),
    ),
}
