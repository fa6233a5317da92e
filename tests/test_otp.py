"""
Tests for OTP utilities
"""
import pytest
from datetime import datetime, timedelta
from app.utils.otp import generate_otp, get_otp_expiry, is_otp_expired, is_valid_otp_format
from app.utils.datetime_utils import utcnow


def test_generate_otp():
    """Test OTP generation"""
    otp = generate_otp()
    assert len(otp) == 6
    assert otp.isdigit()
    assert otp[0] != "0"


def test_generate_otp_range_bounds():
    """Test lowest and highest codes the generator can return"""
    assert generate_otp(lambda n: 0) == "100000"
    assert generate_otp(lambda n: n - 1) == "999999"


def test_get_otp_expiry():
    """Test OTP expiry calculation"""
    expiry = get_otp_expiry()
    assert expiry > utcnow()
    # Should be about 5 minutes (300 seconds) in future
    diff = (expiry - utcnow()).total_seconds()
    assert 290 < diff < 310


def test_get_otp_expiry_from_given_time():
    """Test expiry is exactly 5 minutes after the given time"""
    now = datetime(2025, 1, 1, 12, 0, 0)
    assert get_otp_expiry(now) == datetime(2025, 1, 1, 12, 5, 0)


def test_is_otp_expired():
    """Test OTP expiry check"""
    past = utcnow() - timedelta(seconds=10)
    future = utcnow() + timedelta(seconds=10)

    assert is_otp_expired(past) == True
    assert is_otp_expired(future) == False


def test_is_otp_expired_at_boundary():
    """Test OTP is expired exactly at expires_at"""
    now = datetime(2025, 1, 1, 12, 0, 0)
    assert is_otp_expired(now, now) == True


@pytest.mark.parametrize("code,expected", [
    ("123456", True),
    ("000000", True),
    ("12345", False),
    ("1234567", False),
    ("12a456", False),
    ("", False),
    ("١٢٣٤٥٦", False),
    (123456, False),
])
def test_is_valid_otp_format(code, expected):
    """Test six-digit format check"""
    assert is_valid_otp_format(code) == expected
