# Copyright European Space Agency, 2013

"""
Local geodetic datums as listed in appendices B and C of "Department of
Defense World Geodetic System 1984", NIMA TR8350.2, with their DMA
identification codes, reference ellipsoids and the translation of their
origin relative to WGS84 in meters.

Grid coordinates given on a local datum have to be converted with the
reference ellipsoid of that datum, e.g.::

    from utmups.datum import datum
    nad27 = datum('NAS-C')
    pos = geographic_to_grid(nad27.ellipsoid.a, nad27.ellipsoid.e2, lat, lon)

The translations (dx, dy, dz) are carried for reference only, this package
does not transform between datums.
"""

from collections import namedtuple
from types import MappingProxyType

from utmups.ellipsoid import ellipsoids

__all__ = ['Datum', 'datum', 'datums']

Datum = namedtuple('Datum', ['name', 'code', 'ellipsoid', 'dx', 'dy', 'dz']) # dx, dy, dz in meters

def _datum(name, code, ellipsoidCode, dx, dy, dz):
    return Datum(name, code, ellipsoids[ellipsoidCode], dx, dy, dz)

_datums = [
    _datum("ADINDAN, Mean Solution (Ethiopia and Sudan)", 'ADI-M', 'CD', -166, -15, 204),
    _datum("ADINDAN, Burkina Faso", 'ADI-E', 'CD', -118, -14, 218),
    _datum("ADINDAN, Cameroon", 'ADI-F', 'CD', -134, -2, 210),
    _datum("ADINDAN, Ethiopia", 'ADI-A', 'CD', -165, -11, 206),
    _datum("ADINDAN, Mali", 'ADI-C', 'CD', -123, -20, 220),
    _datum("ADINDAN, Senegal", 'ADI-D', 'CD', -128, -18, 224),
    _datum("ADINDAN, Sudan", 'ADI-B', 'CD', -161, -14, 205),
    _datum("AFGOOYE, Somalia", 'AFG', 'KA', -43, -163, 45),
    _datum("ARC 1950, Mean Solution (Botswana, Lesotho,Malawi, Swaziland, Zaire, Zambia and Zimbabwe)", 'ARF-M', 'CD', -143, -90, -294),
    _datum("ARC 1950, Botswana", 'ARF-A', 'CD', -138, -105, -289),
    _datum("ARC 1950, Burundi", 'ARF-H', 'CD', -153, -5, -292),
    _datum("ARC 1950, Lesotho", 'ARF-B', 'CD', -125, -108, -295),
    _datum("ARC 1950, Malawi", 'ARF-C', 'CD', -161, -73, -317),
    _datum("ARC 1950, Swaziland", 'ARF-D', 'CD', -134, -105, -295),
    _datum("ARC 1950, Zaire", 'ARF-E', 'CD', -169, -19, -278),
    _datum("ARC 1950, Zambia", 'ARF-F', 'CD', -147, -74, -283),
    _datum("ARC 1950, Zimbabwe", 'ARF-G', 'CD', -142, -96, -293),
    _datum("ARC 1960, Mean Solution (Kenya and Tanzania)", 'ARS-M', 'CD', -160, -6, -302),
    _datum("ARC 1960, Kenya", 'ARS-A', 'CD', -157, -2, -299),
    _datum("ARC 1960, Tanzania", 'ARS-B', 'CD', -175, -23, -303),
    _datum("AYABELLE LIGHTHOUSE, Djibouti", 'PHA', 'CD', -79, -129, 145),
    _datum("BISSAU, Guinea-Bissau", 'BID', 'IN', -173, 253, 27),
    _datum("CAPE, South Africa", 'CAP', 'CD', -136, -108, 292),
    _datum("CARTHAGE, Tunisia", 'CGE', 'CD', -263, 6, 431),
    _datum("DABOLA, Guinea", 'DAL', 'CD', -83, 37, 124),
    _datum("EUROPEAN 1950, Egypt", 'EUR-F', 'IN', -130, -117, -151),
    _datum("EUROPEAN 1950, Tunisia", 'EUR-T', 'IN', -112, -77, -145),
    _datum("LEIGON, Ghana", 'LEH', 'CD', -130, 29, 364),
    _datum("LIBERIA 1964, Liberia", 'LIB', 'CD', -90, 40, 88),
    _datum("MASSAWA, Eritrea (Ethiopia)", 'MAS', 'BR', 639, 405, 60),
    _datum("MERCHICH, Morocco", 'MER', 'CD', 31, 146, 47),
    _datum("MINNA, Cameroon", 'MIN-A', 'CD', -81, -84, 115),
    _datum("MINNA, Nigeria", 'MIN-B', 'CD', -92, -93, 122),
    _datum("M'PORALOKO, Gabon", 'MPO', 'CD', -74, -130, 42),
    _datum("NORTH SAHARA 1959, Algeria", 'NSD', 'CD', -186, -93, 310),
    _datum("OLD EGYPTIAN 1907, Egypt", 'OEG', 'HE', -130, 110, -13),
    _datum("POINT 58, Mean Solution (Burkina Faso and Niger)", 'PTB', 'CD', -106, -129, 165),
    _datum("POINTE NOIRE 1948, Congo", 'PTN', 'CD', -148, 51, -291),
    _datum("SCHWARZECK, Namibia", 'SCK', 'BN', 616, 97, -251),
    _datum("SIERRA LEONE 1960, Sierra Leone", 'SRL', 'CD', -88, 4, 101),
    _datum("VOIROL 1960, Algeria", 'VOR', 'CD', -123, -206, 219),
    _datum("AIN EL ABD 1970, Bahrain Island", 'AIN-A', 'IN', -150, -250, -1),
    _datum("AIN EL ABD 1970, Saudi Arabia", 'AIN-B', 'IN', -143, -236, 7),
    _datum("DJAKARTA (BATAVIA), Sumatra (Indonesia)", 'BAT', 'BR', -377, 681, -50),
    _datum("EUROPEAN 1950, Iran", 'EUR-H', 'IN', -117, -132, -164),
    _datum("HONG KONG 1963, Hong Kong", 'HKD', 'IN', -156, -271, -189),
    _datum("HU-TZU-SHAN, Taiwan", 'HTN', 'IN', -637, -549, -203),
    _datum("INDIAN, Bangladesh", 'IND-B', 'EA', 282, 726, 254),
    _datum("INDIAN, India and Nepal", 'IND-I', 'EC', 295, 736, 257),
    _datum("INDIAN 1954, Thailand", 'INF-A', 'EA', 217, 823, 299),
    _datum("INDIAN 1960, Vietnam (near 16°N)", 'ING-A', 'EA', 198, 881, 317),
    _datum("INDIAN 1960, Con Son Island (Vietnam)", 'ING-B', 'EA', 182, 915, 344),
    _datum("INDIAN 1975, Thailand", 'INH-A', 'EA', 209, 818, 290),
    _datum("INDIAN 1975, Thailand", 'INH-A1', 'EA', 210, 814, 289),
    _datum("INDONESIAN 1974, Indonesia", 'IDN', 'ID', -24, -15, 5),
    _datum("KANDAWALA, Sri Lanka", 'KAN', 'EA', -97, 787, 86),
    _datum("KERTAU 1948, West Malaysia and Singapore", 'KEA', 'EE', -11, 851, 5),
    _datum("KOREAN GEODETIC SYSTEM 1995, South Korea", 'KGS', 'WE', 0, 0, 0),
    _datum("NAHRWAN, Masirah Island (Oman)", 'NAH-A', 'CD', -247, -148, 369),
    _datum("NAHRWAN, United Arab Emirates", 'NAH-B', 'CD', -249, -156, 381),
    _datum("NAHRWAN, Saudi Arabia", 'NAH-C', 'CD', -243, -192, 477),
    _datum("OMAN, Oman", 'FAH', 'CD', -346, -1, 224),
    _datum("QATAR NATIONAL, Qatar", 'QAT', 'IN', -128, -283, 22),
    _datum("SOUTH ASIA, Singapore", 'SOA', 'FA', 7, -10, -26),
    _datum("TIMBALAI 1948, Brunei and East Malaysia (Sarawak and Sabah)", 'TIL', 'EB', -679, 669, -48),
    _datum("TOKYO, Mean Solution (Japan, Okinawa and South Korea)", 'TOY-M', 'BR', -148, 507, 685),
    _datum("TOKYO, Japan", 'TOY-A', 'BR', -148, 507, 685),
    _datum("TOKYO, Okinawa", 'TOY-C', 'BR', -158, 507, 676),
    _datum("TOKYO, South Korea", 'TOY-B', 'BR', -146, 507, 687),
    _datum("TOKYO, South Korea", 'TOY-B1', 'BR', -147, 506, 687),
    _datum("AUSTRALIAN GEODETIC 1966, Australia and Tasmania", 'AUA', 'AN', -133, -48, 148),
    _datum("AUSTRALIAN GEODETIC 1984, Australia and Tasmania", 'AUG', 'AN', -134, -48, 149),
    _datum("CO-ORDINATE SYSTEM 1937 OF ESTONIA, Estonia", 'EST', 'BR', 374, 150, 588),
    _datum("EUROPEAN 1950, Mean Solution {Austria, Belgium, Denmark, Finland, France, FRG (Federal Republic of Germany), Gibraltar, Greece, Italy, Luxembourg, Netherlands, Norway, Portugal, Spain, Sweden and Switzerland}", 'EUR-M', 'IN', -87, -98, -121),
    _datum("EUROPEAN 1950, Western Europe {Limited to Austria, Denmark, France, FRG (Federal Republic of Germany), Netherlands and Switzerland}", 'EUR-A', 'IN', -87, -96, -120),
    _datum("EUROPEAN 1950, Cyprus", 'EUR-E', 'IN', -104, -101, -140),
    _datum("EUROPEAN 1950, England, Channel Islands, Scotland and Shetland Islands", 'EUR-G', 'IN', -86, -96, -120),
    _datum("EUROPEAN 1950, England, Ireland, Scotland and Shetland Islands", 'EUR-K', 'IN', -86, -96, -120),
    _datum("EUROPEAN 1950, Greece", 'EUR-B', 'IN', -84, -95, -130),
    _datum("EUROPEAN 1950, Italy, Sardinia", 'EUR-I', 'IN', -97, -103, -120),
    _datum("EUROPEAN 1950, Italy, Sicily", 'EUR-J', 'IN', -97, -88, -135),
    _datum("EUROPEAN 1950, Malta", 'EUR-L', 'IN', -107, -88, -149),
    _datum("EUROPEAN 1950, Norway and Finland", 'EUR-C', 'IN', -87, -95, -120),
    _datum("EUROPEAN 1950, Portugal and Spain", 'EUR-D', 'IN', -84, -107, -120),
    _datum("EUROPEAN 1979, Mean Solution (Austria, Finland, Netherlands, Norway, Spain, Sweden and Switzerland)", 'EUS', 'IN', -86, -98, -119),
    _datum("HJORSEY 1955, Iceland", 'HJO', 'IN', -73, 46, -86),
    _datum("IRELAND 1965", 'IRL', 'AM', 506, -122, 611),
    _datum("ORDNANCE SURVEY OF GREAT BRITAIN 1936, Mean Solution (England, Isle of Man, Scotland, Shetland Islands and Wales)", 'OGB-M', 'AA', 375, -111, 431),
    _datum("ORDNANCE SURVEY OF GREAT BRITAIN 1936, England", 'OGB-A', 'AA', 371, -112, 434),
    _datum("ORDNANCE SURVEY OF GREAT BRITAIN 1936, England, Isle of Man and Wales", 'OGB-B', 'AA', 371, -111, 434),
    _datum("ORDNANCE SURVEY OF GREAT BRITAIN 1936, Scotland and Shetland Islands", 'OGB-C', 'AA', 384, -111, 425),
    _datum("ORDNANCE SURVEY OF GREAT BRITAIN 1936, Wales", 'OGB-D', 'AA', 370, -108, 434),
    _datum("ROME 1940, Sardinia", 'MOD', 'IN', -225, -65, 9),
    _datum("S-42 (PULKOVO 1942), Hungary", 'SPK-A', 'KA', 28, -121, -77),
    _datum("S-42 (PULKOVO 1942), Poland", 'SPK-B', 'KA', 23, -124, -82),
    _datum("S-42 (PULKOVO 1942), Czechoslovakia", 'SPK-C', 'KA', 26, -121, -78),
    _datum("S-42 (PULKOVO 1942), Latvia", 'SPK-D', 'KA', 24, -124, -82),
    _datum("S-42 (PULKOVO 1942), Kazakhstan", 'SPK-E', 'KA', 15, -130, -84),
    _datum("S-42 (PULKOVO 1942), Albania", 'SPK-F', 'KA', 24, -130, -92),
    _datum("S-42 (PULKOVO 1942), Romania", 'SPK-G', 'KA', 28, -121, -77),
    _datum("S-JTSK Czechoslovakia", 'CCD', 'BR', 589, 76, 480),
    _datum("CAPE CANAVERAL, Mean Solution (Florida and Bahamas)", 'CAC', 'CC', -2, 151, 181),
    _datum("NORTH AMERICAN 1927, Mean Solution (CONUS)", 'NAS-C', 'CC', -8, 160, 176),
    _datum("NORTH AMERICAN 1927, Western United States (Arizona, Arkansas, California, Colorado, Idaho, Iowa, Kansas, Montana, Nebraska, Nevada, New Mexico, North Dakota, Oklahoma, Oregon, South Dakota, Texas, Utah, Washington and Wyoming)", 'NAS-B', 'CC', -8, 159, 175),
    _datum("NORTH AMERICAN 1927, Eastern United States (Alabama, Connecticut, Delaware, District of Columbia, Florida, Georgia, Illinois, Indiana, Kentucky, Louisiana, Maine, Maryland, Massachusetts, Michigan, Minnesota, Mississippi, Missouri, New Hampshire, New Jersey, New York, North Carolina, Ohio, Pennsylvania, Rhode Island, South Carolina, Tennessee, Vermont, Virginia, West Virginia and Wisconsin)", 'NAS-A', 'CC', -9, 161, 179),
    _datum("NORTH AMERICAN 1927, Alaska (Excluding Aleutian Islands)", 'NAS-D', 'CC', -5, 135, 172),
    _datum("NORTH AMERICAN 1927, Aleutian Islands, East of 180°W", 'NAS-V', 'CC', -2, 152, 149),
    _datum("NORTH AMERICAN 1927, Aleutian Islands, West of 180°W", 'NAS-W', 'CC', 2, 204, 105),
    _datum("NORTH AMERICAN 1927, Bahamas (Excluding San Salvador Island)", 'NAS-Q', 'CC', -4, 154, 178),
    _datum("NORTH AMERICAN 1927, San Salvador Island", 'NAS-R', 'CC', 1, 140, 165),
    _datum("NORTH AMERICAN 1927, Canada Mean Solution (Including Newfoundland)", 'NAS-E', 'CC', -10, 158, 187),
    _datum("NORTH AMERICAN 1927, Alberta and British Columbia", 'NAS-F', 'CC', -7, 162, 188),
    _datum("NORTH AMERICAN 1927, Eastern Canada (Newfoundland, New Brunswick, Nova Scotia and Quebec)", 'NAS-G', 'CC', -22, 160, 190),
    _datum("NORTH AMERICAN 1927, Manitoba and Ontario", 'NAS-H', 'CC', -9, 157, 184),
    _datum("NORTH AMERICAN 1927, Northwest Territories and Saskatchewan", 'NAS-I', 'CC', 4, 159, 188),
    _datum("NORTH AMERICAN 1927, Yukon", 'NAS-J', 'CC', -7, 139, 181),
    _datum("NORTH AMERICAN 1927, Canal Zone", 'NAS-O', 'CC', 0, 125, 201),
    _datum("NORTH AMERICAN 1927, Caribbean (Antigua Island, Barbados, Barbuda, Caicos Islands, Cuba, Dominican Republic, Grand Cayman, Jamaica and Turks Islands)", 'NAS-P', 'CC', -3, 142, 183),
    _datum("NORTH AMERICAN 1927, Central America (Belize, Costa Rica, El Salvador, Guatemala, Honduras and Nicaragua)", 'NAS-N', 'CC', 0, 125, 194),
    _datum("NORTH AMERICAN 1927, Cuba", 'NAS-T', 'CC', -9, 152, 178),
    _datum("NORTH AMERICAN 1927, Greenland (Hayes Peninsula)", 'NAS-U', 'CC', 11, 114, 195),
    _datum("NORTH AMERICAN 1927, Mexico", 'NAS-L', 'CC', -12, 130, 190),
    _datum("NORTH AMERICAN 1983, Alaska (Excluding Aleutian Islands)", 'NAR-A', 'RF', 0, 0, 0),
    _datum("NORTH AMERICAN 1983, Aleutian Islands", 'NAR-E', 'RF', -2, 0, 4),
    _datum("NORTH AMERICAN 1983, Canada", 'NAR-B', 'RF', 0, 0, 0),
    _datum("NORTH AMERICAN 1983, CONUS", 'NAR-C', 'RF', 0, 0, 0),
    _datum("NORTH AMERICAN 1983, Hawaii", 'NAR-H', 'RF', 1, 1, -1),
    _datum("NORTH AMERICAN 1983, Mexico and Central America", 'NAR-D', 'RF', 0, 0, 0),
    _datum("BOGOTA OBSERVATORY, Colombia", 'BOO', 'IN', 307, 304, -318),
    _datum("CAMPO INCHAUSPE 1969, Argentina", 'CAI', 'IN', -148, 136, 90),
    _datum("CHUA ASTRO, Paraguay", 'CHU', 'IN', -134, 229, -29),
    _datum("CORREGO ALEGRE, Brazil", 'COA', 'IN', -206, 172, -6),
    _datum("PROVISIONAL SOUTH AMERICAN 1956, Mean Solution (Bolivia, Chile, Colombia, Ecuador, Guyana, Peru and Venezuela)", 'PRP-M', 'IN', -288, 175, -376),
    _datum("PROVISIONAL SOUTH AMERICAN 1956, Bolivia", 'PRP-A', 'IN', -270, 188, -388),
    _datum("PROVISIONAL SOUTH AMERICAN 1956, Chile, Northern Chile (near 19°S)", 'PRP-B', 'IN', -270, 183, -390),
    _datum("PROVISIONAL SOUTH AMERICAN 1956, Southern Chile (near 43°S)", 'PRP-C', 'IN', -305, 243, -442),
    _datum("PROVISIONAL SOUTH AMERICAN 1956, Colombia", 'PRP-D', 'IN', -282, 169, -371),
    _datum("PROVISIONAL SOUTH AMERICAN 1956, Ecuador", 'PRP-E', 'IN', -278, 171, -367),
    _datum("PROVISIONAL SOUTH AMERICAN 1956, Guyana", 'PRP-F', 'IN', -298, 159, -369),
    _datum("PROVISIONAL SOUTH AMERICAN 1956, Peru", 'PRP-G', 'IN', -279, 175, -379),
    _datum("PROVISIONAL SOUTH AMERICAN 1956, Venezuela", 'PRP-H', 'IN', -295, 173, -371),
    _datum("PROVISIONAL SOUTH CHILEAN 1963, Southern Chile (near 53°S)", 'HIT', 'IN', 16, 196, 93),
    _datum("SOUTH AMERICAN 1969, Mean Solution (Argentina, Bolivia, Brazil, Chile, Colombia, Ecuador, Guyana, Paraguay, Peru, Trinidad and Tobago and Venezuela)", 'SAN-M', 'SA', -57, 1, -41),
    _datum("SOUTH AMERICAN 1969, Argentina", 'SAN-A', 'SA', -62, -1, -37),
    _datum("SOUTH AMERICAN 1969, Bolivia", 'SAN-B', 'SA', -61, 2, -48),
    _datum("SOUTH AMERICAN 1969, Brazil", 'SAN-C', 'SA', -60, -2, -41),
    _datum("SOUTH AMERICAN 1969, Chile", 'SAN-D', 'SA', -75, -1, -44),
    _datum("SOUTH AMERICAN 1969, Colombia", 'SAN-E', 'SA', -44, 6, -36),
    _datum("SOUTH AMERICAN 1969, Ecuador (Excluding Galapagos Islands)", 'SAN-F', 'SA', -48, 3, -44),
    _datum("SOUTH AMERICAN 1969, Baltra and Galapagos Islands", 'SAN-J', 'SA', -47, 26, -42),
    _datum("SOUTH AMERICAN 1969, Guyana", 'SAN-G', 'SA', -53, 3, -47),
    _datum("SOUTH AMERICAN 1969, Paraguay", 'SAN-H', 'SA', -61, 2, -33),
    _datum("SOUTH AMERICAN 1969, Peru", 'SAN-I', 'SA', -58, 0, -44),
    _datum("SOUTH AMERICAN 1969, Trinidad and Tobago", 'SAN-K', 'SA', -45, 12, -33),
    _datum("SOUTH AMERICAN 1969, Venezuela", 'SAN-L', 'SA', -45, 8, -33),
    _datum("SOUTH AMERICAN GEOCENTRIC REFERENCE SYSTEM (SIRGAS)", 'SIR', 'RF', 0, 0, 0),
    _datum("ZANDERIJ, Suriname", 'ZAN', 'IN', -265, 120, -358),
    _datum("ANTIGUA ISLAND ASTRO 1943, Antigua and Leeward Islands", 'AIA', 'CD', -270, 13, 62),
    _datum("ASCENSION ISLAND 1958, Ascension Island", 'ASC', 'IN', -205, 107, 53),
    _datum("ASTRO DOS 71/4, St. Helena Island", 'SHB', 'IN', -320, 550, -494),
    _datum("BERMUDA 1957, Bermuda Islands", 'BER', 'CC', -73, 213, 296),
    _datum("DECEPTION ISLAND, Deception Island and Antarctica", 'DID', 'CD', 260, 12, -147),
    _datum("FORT THOMAS 1955, Nevis, St. Kitts and Leeward Islands", 'FOT', 'CD', -7, 215, 225),
    _datum("GRACIOSA BASE SW 1948, Faial, Graciosa, Pico, Sao Jorge and Terceira Islands (Azores)", 'GRA', 'IN', -104, 167, -38),
    _datum("ISTS 061 ASTRO 1968, South Georgia Island", 'ISG', 'IN', -794, 25, 25),
    _datum("L. C. 5 ASTRO 1961, Cayman Brac Island", 'LCF', 'CC', 42, 124, 147),
    _datum("MONTSERRAT ISLAND ASTRO 1958, Montserrat and Leeward Islands", 'ASM', 'CD', 174, 359, 365),
    _datum("NAPARIMA BWI, Trinidad and Tobago", 'NAP', 'IN', -10, 375, 165),
    _datum("OBSERVATORIO METEOROLOGICO 1939, Corvo and Flores Islands (Azores)", 'FLO', 'IN', -425, -169, 81),
    _datum("PICO DE LAS NIEVES, Canary Islands", 'PLN', 'IN', -307, -92, 127),
    _datum("PORTO SANTO, Porto Santo and Madeira Islands", 'POS', 'IN', -499, -249, 314),
    _datum("PUERTO RICO, Puerto Rico and Virgin Islands", 'PUR', 'CC', 11, 72, -101),
    _datum("QORNOQ, South Greenland", 'QUO', 'IN', 164, 138, -189),
    _datum("SAO BRAZ, Sao Miguel and Santa Maria Islands (Azores)", 'SAO', 'IN', -203, 141, 53),
    _datum("SAPPER HILL, East Falkland Island", 'SAP', 'IN', -355, 21, 72),
    _datum("SELVAGEM GRANDE 1938, Salvage Islands", 'SGM', 'IN', -289, -124, 60),
    _datum("TRISTAN ASTRO 1968, Tristan da Cunha", 'TDC', 'IN', -632, 438, -609),
    _datum("ANNA 1 ASTRO 1965, Cocos Islands", 'ANO', 'AN', -491, -22, 435),
    _datum("GAN 1970, Republic of Maldives", 'GAA', 'IN', -133, -321, 50),
    _datum("ISTS 073 ASTRO 1969, Diego Garcia", 'IST', 'IN', 208, -435, -229),
    _datum("KERGUELEN ISLAND 1949, Kerguelen Island", 'KEG', 'IN', 145, -187, 103),
    _datum("MAHE 1971, Mahe Island", 'MIK', 'CD', 41, -220, -134),
    _datum("REUNION, Mascarene Islands", 'REU', 'IN', 94, -948, -1262),
    _datum("AMERICAN SAMOA 1962, American Samoa Islands", 'AMA', 'CC', -115, 118, 426),
    _datum("ASTRO BEACON \"E\", Iwo Jima", 'ATF', 'IN', 145, 75, -272),
    _datum("ASTRO TERN ISLAND (FRIG) 1961, Tern Island", 'TRN', 'IN', 114, -116, -333),
    _datum("ASTRONOMICAL STATION 1952, Marcus Island", 'ASQ', 'IN', 124, -234, -25),
    _datum("BELLEVUE (IGN),Efate and Erromango Islands", 'IBE', 'IN', -127, -769, 472),
    _datum("CANTON ASTRO 1966, Phoenix Islands", 'CAO', 'IN', 298, -304, -375),
    _datum("CHATHAM ISLAND ASTRO 1971, Chatham Island (New Zealand)", 'CHI', 'IN', 175, -38, 113),
    _datum("DOS 1968, Gizo Island (New Georgia Islands)", 'GIZ', 'IN', 230, -199, -752),
    _datum("EASTER ISLAND 1967, Easter Island", 'EAS', 'IN', 211, 147, 111),
    _datum("GEODETIC DATUM 1949, New Zealand", 'GEO', 'IN', 84, -22, 209),
    _datum("GUAM 1963, Guam", 'GUA', 'CC', -100, -248, 259),
    _datum("GUX l ASTRO, Guadalcanal Island", 'DOB', 'IN', 252, -209, -751),
    _datum("JOHNSTON ISLAND 1961, Johnston Island", 'JOH', 'IN', 189, -79, -202),
    _datum("KUSAIE ASTRO 1951, Caroline Islands, Fed. States of Micronesia", 'KUS', 'IN', 647, 1777, -1124),
    _datum("LUZON, Philippines (Excluding Mindanao Island)", 'LUZ-A', 'CC', -133, -77, -51),
    _datum("LUZON, Mindanao Island", 'LUZ-B', 'CC', -133, -79, -72),
    _datum("MIDWAY ASTRO 1961, Midway Islands 2003", 'MID', 'IN', 403, -81, 277),
    _datum("MIDWAY ASTRO 1961, Midway Islands 1987", 'MID-87', 'IN', 912, -58, 1227),
    _datum("OLD HAWAIIAN, Mean Solution", 'OHA-M', 'CC', 61, -285, -181),
    _datum("OLD HAWAIIAN, Hawaii", 'OHA-A', 'CC', 89, -279, -183),
    _datum("OLD HAWAIIAN, Kauai", 'OHA-B', 'CC', 45, -290, -172),
    _datum("OLD HAWAIIAN, Maui", 'OHA-C', 'CC', 65, -290, -190),
    _datum("OLD HAWAIIAN, Oahu", 'OHA-D', 'CC', 58, -283, -182),
    _datum("OLD HAWAIIAN, Mean Solution", 'OHI-M', 'IN', 201, -228, -346),
    _datum("OLD HAWAIIAN, Hawaii", 'OHI-A', 'IN', 229, -222, -348),
    _datum("OLD HAWAIIAN, Kauai", 'OHI-B', 'IN', 185, -233, -337),
    _datum("OLD HAWAIIAN, Maui", 'OHI-C', 'IN', 205, -233, -355),
    _datum("OLD HAWAIIAN, Oahu", 'OHI-D', 'IN', 198, -226, -347),
    _datum("PITCAIRN ASTRO 1967, Pitcairn Island", 'PIT', 'IN', 185, 165, 42),
    _datum("SANTO (DOS) 1965, Espirito Santo Island", 'SAE', 'IN', 170, 42, 84),
    _datum("VITI LEVU 1916, Viti Levu Island (Fiji Islands)", 'MVS', 'CD', 51, 391, -36),
    _datum("WAKE-ENIWETOK 1960, Marshall Islands", 'ENW', 'HO', 102, 52, -38),
    _datum("WAKE ISLAND ASTRO 1952, Wake Atoll", 'WAK', 'IN', 276, -57, 149),
    _datum("BUKIT RIMPAH, Bangka and Belitung Islands (Indonesia)", 'BUR', 'BR', -384, 664, -48),
    _datum("CAMP AREA ASTRO, Camp McMurdo Area, Antarctica", 'CAZ', 'IN', -104, -129, 239),
    _datum("EUROPEAN 1950, Iraq, Israel, Jordan, Kuwait, Lebanon, Saudi Arabia and Syria", 'EUR-S', 'IN', -103, -106, -141),
    _datum("GUNUNG SEGARA, Kalimantan (Indonesia)", 'GSE', 'BR', -403, 684, 41),
    _datum("HERAT NORTH, Afghanistan", 'HEN', 'IN', -333, -222, 114),
    _datum("HERMANNSKOGEL, Yugoslavia (Prior to 1990) Slovenia, Croatia, Bosnia and Herzegovina and Serbia", 'HER', 'BR', 682, -203, 480),
    _datum("INDIAN, Pakistan", 'IND-P', 'EF', 283, 682, 231),
    _datum("PULKOVO 1942, Russia", 'PUK', 'KA', 28, -130, -95),
    _datum("TANANARIVE OBSERVATORY 1925, Madagascar", 'TAN', 'IN', -189, -242, -91),
    _datum("VOIROL 1874, Tunisia and Algeria", 'VOI', 'CD', -73, -247, 227),
    _datum("YACARE, Uruguay", 'YAC', 'IN', -155, 171, 37),
    ]

datums = MappingProxyType({d.code: d for d in _datums})
"""Read-only mapping from DMA datum code (e.g. ``'NAS-C'``) to :class:`Datum`."""

def datum(code):
    """
    Return the local geodetic datum for the given DMA code, case-insensitive.
    Underscores may be used in place of dashes, e.g. ``'nas_c'``.

    :rtype: Datum
    :raise KeyError: if the code is unknown
    """
    key = code.strip().upper().replace('_', '-')
    try:
        return datums[key]
    except KeyError:
        raise KeyError('Unknown datum: ' + code)
