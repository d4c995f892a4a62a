from bureaux_rounds.clustering.grouping import build_groups, resolve_coordinates, resolve_postal_code
from tests.utils.points import make_record


def test_resolve_postal_code_fallbacks():
    assert resolve_postal_code({'cp': '75001', 'code_postal': '75002'}) == '75001'
    assert resolve_postal_code({'code_postal': '75002'}) == '75002'
    assert resolve_postal_code({'cp': '', 'code_postal': None}) == 'unknown'
    assert resolve_postal_code({}, unknown='n/a') == 'n/a'
    # The value is kept as found, numbers included
    assert resolve_postal_code({'cp': 75001}) == 75001


def test_resolve_coordinates():
    assert resolve_coordinates({'geo_point_2d': {'lat': 48.8, 'lon': 2.3}}) == (48.8, 2.3)
    assert resolve_coordinates({'geo_point_2d': {'lat': 0, 'lon': 0}}) == (0.0, 0.0)
    assert resolve_coordinates({'geo_point_2d': {'lat': 48.8}}) is None
    assert resolve_coordinates({'geo_point_2d': {'lat': None, 'lon': 2.3}}) is None
    assert resolve_coordinates({'geo_point_2d': None}) is None
    assert resolve_coordinates({'geo_point_2d': [48.8, 2.3]}) is None
    assert resolve_coordinates({}) is None


def test_build_groups_partitions_by_postal_code_in_order():
    records = [
        make_record(1, cp='75002'),
        make_record(2, cp='75001'),
        make_record(3, cp='75002', north=100),
    ]
    groups = build_groups(records)
    assert list(groups) == ['75002', '75001']
    assert [p.objectid for p in groups['75002']] == [1, 3]
    assert [p.objectid for p in groups['75001']] == [2]


def test_build_groups_skips_records_without_coordinates():
    missing_geo = make_record(2)
    del missing_geo['geo_point_2d']
    missing_lon = make_record(3, cp='75003')
    missing_lon['geo_point_2d']['lon'] = None

    groups = build_groups([make_record(1), missing_geo, missing_lon])

    assert [p.objectid for p in groups['75001']] == [1]
    # A postal code whose only record lacks coordinates never appears
    assert '75003' not in groups


def test_build_groups_dedupes_address_keeping_first():
    records = [
        make_record(1, adresse='4 place du Louvre'),
        make_record(2, adresse='4 place du Louvre', north=50),
        make_record(3, adresse='4 place du Louvre', cp='75002'),
    ]
    groups = build_groups(records)
    assert [p.objectid for p in groups['75001']] == [1]
    # Same address in another postal code is a different station
    assert [p.objectid for p in groups['75002']] == [3]


def test_build_groups_keeps_station_fields():
    record = make_record(7, north=10, cp=None)
    record['code_postal'] = '75007'
    del record['cp']

    point = build_groups([record])['75007'][0]

    assert point.to_dict() == {
        'objectid': 7,
        'id_bv': record['id_bv'],
        'num_bv': 7,
        'lib': record['lib'],
        'adresse': record['adresse'],
        'cp': '75007',
        'lat': record['geo_point_2d']['lat'],
        'lon': record['geo_point_2d']['lon'],
    }


def test_build_groups_unknown_sentinel():
    record = make_record(1)
    del record['cp']
    assert list(build_groups([record])) == ['unknown']
    assert list(build_groups([record], unknown_postal_code='00000')) == ['00000']


def test_build_groups_empty():
    assert build_groups([]) == {}


def test_numeric_postal_code_shares_group_and_keeps_raw_value():
    numeric = make_record(1, cp=75004)
    text = make_record(2, north=100, cp='75004')

    groups = build_groups([numeric, text])

    assert list(groups) == ['75004']
    assert [p.to_dict()['cp'] for p in groups['75004']] == [75004, '75004']
