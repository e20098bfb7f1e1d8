from ninelayer.core.digits import extract_digits, parse_digits
from ninelayer.core.draws import Draw, draw_number, draws_from_payload

def test_extract_comma_form():
    assert extract_digits("1,2,3,4") == "234"
    assert extract_digits(" 1, 2 ,3, 4 ") == "234"
    assert extract_digits("1,2,3,4,5") == "234"

def test_extract_plain_form():
    assert extract_digits("1234") == "234"
    assert extract_digits("98765") == "765"

def test_extract_pass_through():
    assert extract_digits("12") == "12"
    assert extract_digits("") == ""
    assert extract_digits("1,2") == "1,2"   # short comma form falls through unchanged

def test_parse_digits_skips_junk():
    assert parse_digits("2a3") == [2, 3]
    assert parse_digits("") == []

def test_draw_number_accepts_shapes():
    assert draw_number(Draw(number="1,2,3,4")) == "1,2,3,4"
    assert draw_number({"number": "5678"}) == "5678"
    assert draw_number("999") == "999"
    assert Draw(number="0123").digits == "123"

def test_payload_list_and_single():
    out = draws_from_payload([{"number": "1,2,3,4", "drawDate": "2024-03-20", "period": "1", "id": "7"},
                              {"period": "2"}, "junk"])
    assert out == [Draw(number="1,2,3,4", id=7, draw_date="2024-03-20", period="1")]
    assert draws_from_payload({"number": "4321"}) == [Draw(number="4321")]
