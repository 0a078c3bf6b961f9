import numpy

from phq.core import text


def test_case_helpers():
    """Test the simple string transformations."""
    assert text.lowercase('Electric Current') == 'electric current'
    assert text.uppercase('kelvin') == 'KELVIN'
    assert text.snake_case('Substance Amount') == 'substance_amount'
    assert text.replace('m/s/s', '/s/s', '/s^2') == 'm/s^2'
    assert text.split_by_whitespace('  1.0\tm \n s ') == ['1.0', 'm', 's']


def test_parse_integer():
    """Test parsing text into a 64-bit integer."""
    cases = {
        '': None,
        '-Inf': None,
        'Inf': None,
        'NaN': None,
        '-1.23456789e10': None,
        '-1.23456789': None,
        '1e3': None,
        '-7': -7,
        '+42': 42,
        ' 42 ': 42,
        '9223372036854775807': 9223372036854775807,
        '-9223372036854775808': -9223372036854775808,
        '9223372036854775808': None,
    }
    for string, expected in cases.items():
        assert text.parse_integer(string) == expected


def test_parse_number():
    """Test parsing text into a floating-point number."""
    cases = {
        '': None,
        '-Inf': None,
        'Inf': None,
        'NaN': None,
        'abc': None,
        '1.0e10000': None,
        '-1.23456789e10': -1.23456789e10,
        '-1.23456789': -1.23456789,
        '-7': -7.0,
        '42': 42.0,
        ' 3.5 ': 3.5,
        '.5': 0.5,
        '5.': 5.0,
        '2E-3': 2e-3,
    }
    for string, expected in cases.items():
        assert text.parse_number(string) == expected
    assert text.parse_number('1e-400') == 0.0


def test_parse_number_dtype():
    """Parsing should produce the requested floating-point type."""
    value = text.parse_number('0.5', numpy.float32)
    assert isinstance(value, numpy.float32)
    assert value == numpy.float32(0.5)
    assert text.parse_number('1e39', numpy.float32) is None
    value = text.parse_number('0.1', numpy.longdouble)
    assert isinstance(value, numpy.longdouble)


def test_max_digits10():
    """Test the number of digits needed to round-trip each type."""
    assert text.max_digits10(numpy.float32) == 9
    assert text.max_digits10(numpy.float64) == 17


def test_print_number():
    """Test the magnitude-dependent number formatter."""
    cases = [
        (numpy.float32(0), '0'),
        (numpy.float32(-0.0), '0'),
        (numpy.float32(1), '1.000000000'),
        (numpy.float32(-2), '-2.000000000'),
        (numpy.float32(16384), '1.638400000e+04'),
        (numpy.float32(-0.0001220703125), '-1.220703125e-04'),
        (numpy.float32(0.001953125), '0.001953125000'),
        (numpy.float32(0.25), '0.2500000000'),
        (numpy.float32(50), '50.00000000'),
        (numpy.float32(1024), '1024.000000'),
        (1.0, '1.00000000000000000'),
        (0.5, '0.500000000000000000'),
        (12345.0, '1.23450000000000000e+04'),
        (0.0, '0'),
    ]
    for value, expected in cases:
        assert text.print_number(value) == expected


def test_print_number_brackets():
    """Magnitudes should be compared with the bounds in double precision."""
    assert text.print_number(numpy.float32(0.01)) == '0.009999999776'
    assert text.print_number(numpy.float32(-0.01)) == '-0.009999999776'
    assert text.print_number(0.01) == '0.0100000000000000002'


def test_print_number_nonfinite():
    """Infinity and NaN should print without digits."""
    assert text.print_number(numpy.float64('nan')) == 'nan'
    assert text.print_number(numpy.float64('inf')) == 'inf'


def test_print_number_precision():
    """An explicit precision should override the type of the value."""
    assert text.print_number(1.0, text.Precision.SINGLE) == '1.000000000'
    assert text.print_number(
        numpy.float32(1), text.Precision.DOUBLE
    ) == '1.00000000000000000'


def test_precision():
    """Test the enumeration of floating-point precisions."""
    for spelling in ('DOUBLE', 'Double', 'double'):
        assert text.Precision.parse(spelling) is text.Precision.DOUBLE
    assert text.Precision.parse('dOuBlE') is None
    assert text.Precision.parse('half') is None
    assert text.Precision.SINGLE.dtype is numpy.float32
    assert text.Precision.DOUBLE.dtype is numpy.float64
    assert text.Precision.QUADRUPLE.dtype is numpy.longdouble
    assert str(text.Precision.TRIPLE) == 'Triple'
    assert text.Precision.SINGLE.abbreviation == 'Single'


def test_precision_round_trip():
    """Every precision should parse from its own name."""
    for precision in text.Precision:
        assert text.Precision.parse(str(precision)) is precision
