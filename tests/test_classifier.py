import pytest

from backend.services.aviationstack import (
    AIRPORT_PATTERN,
    FLIGHT_NUMBER_PATTERN,
    QueryKind,
    classify_query,
)


@pytest.mark.parametrize('query', ['AA100', 'UA1', 'BA2490', 'DL12345'])
def test_two_letters_then_digits_is_flight_number(query):
    assert classify_query(query) is QueryKind.FLIGHT_NUMBER


@pytest.mark.parametrize('query', ['JFK', 'LAX', 'LHR'])
def test_three_letters_is_airport(query):
    assert classify_query(query) is QueryKind.AIRPORT


@pytest.mark.parametrize('query', ['UA', 'B6', '9W', 'U2'])
def test_two_characters_is_airline(query):
    assert classify_query(query) is QueryKind.AIRLINE


@pytest.mark.parametrize('query', ['AAL100', 'B61', 'JFKX', 'X'])
def test_anything_else_falls_back_to_flight_number(query):
    assert classify_query(query) is QueryKind.FLIGHT_NUMBER


def test_query_kind_maps_to_provider_filter():
    assert QueryKind.FLIGHT_NUMBER.value == 'flight_iata'
    assert QueryKind.AIRPORT.value == 'dep_iata'
    assert QueryKind.AIRLINE.value == 'airline_iata'


def test_flight_number_needs_ascii_digits():
    assert FLIGHT_NUMBER_PATTERN.fullmatch('AA100')
    assert FLIGHT_NUMBER_PATTERN.fullmatch('AA١٠٠') is None
    assert FLIGHT_NUMBER_PATTERN.fullmatch('AA100\n') is None


def test_airport_needs_exact_match():
    assert AIRPORT_PATTERN.fullmatch('JFK\n') is None
    assert classify_query('JFK\n') is QueryKind.FLIGHT_NUMBER
