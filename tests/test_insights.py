from booking import Booking, NO_BOOKINGS, PODS, compute_insights
from booking.insights import fill_rates_frame


class TestComputeInsights:
    def test_reference_example(self, sample_bookings):
        snap = compute_insights(sample_bookings, PODS, 0)
        assert snap.total_bookings == 3
        assert snap.unique_students == 4
        assert snap.busiest_hour == "09:00"
        rates = {r.pod_id: r for r in snap.pod_fill_rates}
        assert rates["POD-A"].fill_rate == 37.5
        assert rates["POD-A"].slots_used == 2
        assert rates["POD-A"].booked_seats == 3
        assert rates["POD-B"].fill_rate == 25.0
        assert rates["POD-C"].fill_rate == 0.0
        assert rates["POD-C"].slots_used == 0

    def test_empty(self):
        snap = compute_insights([], PODS, 7)
        assert snap.total_bookings == 0
        assert snap.unique_students == 0
        assert snap.busiest_hour == NO_BOOKINGS
        assert [r.fill_rate for r in snap.pod_fill_rates] == [0.0, 0.0, 0.0]
        assert snap.duplicate_attempts == 7

    def test_unique_students_across_times(self):
        bookings = [
            Booking("POD-A", "09:00", ["A", "B"]),
            Booking("POD-A", "10:00", ["A"]),
        ]
        assert compute_insights(bookings, PODS).unique_students == 2

    def test_busiest_hour_tie_goes_to_first_seen(self):
        bookings = [
            Booking("POD-A", "11:00", ["A"]),
            Booking("POD-B", "09:00", ["B"]),
        ]
        assert compute_insights(bookings, PODS).busiest_hour == "11:00"

    def test_busiest_hour_sums_across_pods(self):
        bookings = [
            Booking("POD-A", "09:00", ["A", "B"]),
            Booking("POD-A", "10:00", ["C"]),
            Booking("POD-B", "10:00", ["D", "E"]),
        ]
        assert compute_insights(bookings, PODS).busiest_hour == "10:00"

    def test_fill_rate_rounding(self):
        bookings = [
            Booking("POD-A", "09:00", ["A"]),
            Booking("POD-A", "10:00", ["B"]),
            Booking("POD-A", "11:00", ["C", "D"]),
        ]
        rate = compute_insights(bookings, PODS).pod_fill_rates[0]
        assert rate.fill_rate == 33.3
        assert rate.label() == "33.3% (4/12 seats)"

    def test_idempotent(self, sample_bookings):
        assert compute_insights(sample_bookings, PODS, 2) == compute_insights(sample_bookings, PODS, 2)

    def test_fill_rates_frame(self, sample_bookings):
        df = fill_rates_frame(compute_insights(sample_bookings, PODS))
        assert list(df["pod"]) == ["POD-A", "POD-B", "POD-C"]
        assert list(df["possible_seats"]) == [8, 4, 0]
