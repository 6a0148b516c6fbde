from backend.models import format_duration
from backend.services.normalize import transform_pricing


def _itinerary(itinerary_id, amount, carrier_id=1, url='/book/1', origin=10, destination=20):
    return {
        'id': itinerary_id,
        'pricing_options': [
            {
                'price': {'amount': amount, 'update_status': 'current'},
                'agent_ids': ['agent'],
                'items': [{'url': url}],
            },
            # Later options are ignored
            {'price': {'amount': 1.0}, 'agent_ids': [], 'items': []},
        ],
        'legs': [
            {
                'id': f'{itinerary_id}-leg',
                'origin_place_id': origin,
                'destination_place_id': destination,
                'departure': '2026-03-01T08:00:00',
                'arrival': '2026-03-01T11:05:00',
                'duration': 365,
                'stop_count': 0,
                'marketing_carrier_ids': [carrier_id],
            },
        ],
    }


def _response(itineraries, **extra):
    data = {
        'itineraries': itineraries,
        'places': {
            '10': {'id': 10, 'iata': 'JFK', 'name': 'New York John F. Kennedy', 'type': 'PLACE_TYPE_AIRPORT'},
            '20': {'id': 20, 'iata': 'LAX', 'name': 'Los Angeles International', 'type': 'PLACE_TYPE_AIRPORT'},
        },
        'carriers': {
            '1': {'id': 1, 'name': 'Delta', 'iata': 'DL'},
            '2': {'id': 2, 'name': 'JetBlue', 'iata': 'B6'},
        },
        'currency': 'EUR',
    }
    data.update(extra)
    return data


def test_results_are_sorted_by_price():
    prices = transform_pricing(_response([
        _itinerary('a', 420.0),
        _itinerary('b', 199.5, carrier_id=2),
        _itinerary('c', 305.0),
    ]))
    assert [p.price for p in prices] == [199.5, 305.0, 420.0]
    assert [p.itinerary_id for p in prices] == ['b', 'c', 'a']


def test_equal_prices_keep_provider_order():
    prices = transform_pricing(_response([
        _itinerary('first', 250.0),
        _itinerary('cheap', 100.0),
        _itinerary('second', 250.0, carrier_id=2),
        _itinerary('third', 250.0),
    ]))
    assert [p.itinerary_id for p in prices] == ['cheap', 'first', 'second', 'third']


def test_first_option_and_leg_are_mapped():
    price = transform_pricing(_response([_itinerary('a', 199.0)]))[0].to_dict()

    assert price == {
        'id': 'DL-0',
        'price': 199.0,
        'currency': 'EUR',
        'airline': 'Delta',
        'airlineCode': 'DL',
        'departure': {'airport': 'JFK', 'airportName': 'New York John F. Kennedy', 'time': '2026-03-01T08:00:00'},
        'arrival': {'airport': 'LAX', 'airportName': 'Los Angeles International', 'time': '2026-03-01T11:05:00'},
        'duration': 365,
        'durationText': '6h 5m',
        'stops': 0,
        'bookingUrl': 'https://www.skyscanner.com/book/1',
        'itineraryId': 'a',
    }


def test_ids_use_provider_position():
    prices = transform_pricing(_response([_itinerary('a', 300.0), _itinerary('b', 100.0, carrier_id=2)]))
    assert [p.id for p in prices] == ['B6-1', 'DL-0']


def test_missing_lookups_degrade_to_empty_fields():
    price = transform_pricing(_response([_itinerary('a', 99.0, carrier_id=99, origin=77, destination=88)]))[0]
    assert price.airline == 'Unknown Airline'
    assert price.airline_code == ''
    assert price.departure.airport == ''
    assert price.arrival.airport_name == ''


def test_itineraries_without_options_or_legs_are_skipped():
    incomplete = [
        dict(_itinerary('no-options', 50.0), pricing_options=[]),
        dict(_itinerary('no-legs', 60.0), legs=[]),
        _itinerary('ok', 70.0),
    ]
    prices = transform_pricing(_response(incomplete))
    assert [p.itinerary_id for p in prices] == ['ok']


def test_places_and_carriers_as_lists():
    data = _response(
        [_itinerary('a', 120.0, carrier_id=2)],
        places=[
            {'id': 10, 'iata': 'JFK', 'name': 'New York John F. Kennedy'},
            {'id': 20, 'iata': 'LAX', 'name': 'Los Angeles International'},
        ],
        carriers=[{'id': 2, 'name': 'JetBlue', 'iata': 'B6'}],
    )
    price = transform_pricing(data)[0]
    assert price.airline == 'JetBlue'
    assert price.departure.airport == 'JFK'
    assert price.arrival.airport == 'LAX'


def test_absolute_booking_url_and_custom_booking_site():
    data = _response([
        _itinerary('abs', 100.0, url='https://airline.example.com/checkout'),
        _itinerary('rel', 200.0, url='/deeplink?x=1'),
    ])
    prices = transform_pricing(data, 'https://fares.example.com')
    assert prices[0].booking_url == 'https://airline.example.com/checkout'
    assert prices[1].booking_url == 'https://fares.example.com/deeplink?x=1'


def test_missing_amount_and_currency_defaults():
    itinerary = _itinerary('a', None)
    data = _response([itinerary])
    del data['currency']
    price = transform_pricing(data)[0]
    assert price.price == 0
    assert price.currency == 'USD'


def test_empty_response():
    assert transform_pricing({}) == []


def test_format_duration():
    assert format_duration(0) == '0h 0m'
    assert format_duration(59) == '0h 59m'
    assert format_duration(125) == '2h 5m'
