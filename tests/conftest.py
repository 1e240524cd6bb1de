import pytest

from booking import Booking, BookingSession


@pytest.fixture
def log_sink():
    return []


@pytest.fixture
def empty_session(log_sink):
    return BookingSession(seed=[], log_func=log_sink.append)


@pytest.fixture
def sample_bookings():
    return [
        Booking("POD-A", "09:00", ["A", "B"]),
        Booking("POD-A", "10:00", ["C"]),
        Booking("POD-B", "09:00", ["D"]),
    ]
