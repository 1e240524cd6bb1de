import pytest

from booking import BookingStore


class TestBookingStore:
    def test_create_then_merge(self):
        store = BookingStore()
        ids = ["A"]
        first = store.add("POD-A", "09:00", ids)
        ids.append("MUTATED")
        assert first.students == ["A"]

        merged = store.add("POD-A", "09:00", ["B"])
        assert merged is first
        assert len(store) == 1
        assert store[0].students == ["A", "B"]

    def test_distinct_slots_keep_insertion_order(self):
        store = BookingStore()
        store.add("POD-B", "10:00", ["X"])
        store.add("POD-A", "09:00", ["Y"])
        assert [(b.pod_id, b.time) for b in store] == [("POD-B", "10:00"), ("POD-A", "09:00")]

    def test_remove_by_index(self):
        store = BookingStore()
        store.add("POD-A", "09:00", ["A"])
        store.add("POD-B", "09:00", ["B"])
        removed = store.remove(0)
        assert removed.pod_id == "POD-A"
        assert len(store) == 1
        assert store.find("POD-A", "09:00") is None

    @pytest.mark.parametrize("index", [-1, 5])
    def test_remove_out_of_range_is_noop(self, index):
        store = BookingStore()
        store.add("POD-A", "09:00", ["A"])
        assert store.remove(index) is None
        assert len(store) == 1

    def test_load_copies_seed(self):
        seed = [{"pod_id": "POD-A", "time": "09:00", "students": ["sit-001"]}]
        store = BookingStore()
        store.load(seed)
        store.add("POD-A", "09:00", ["X"])
        assert seed[0]["students"] == ["sit-001"]
        assert store[0].students == ["SIT-001", "X"]

    def test_load_rejects_unknown_pod(self):
        with pytest.raises(ValueError):
            BookingStore().load([{"pod_id": "POD-Z", "time": "09:00", "students": []}])


class TestSeedLoading:
    def test_time_normalized_to_slot_key(self):
        store = BookingStore()
        store.load([{"pod_id": "POD-A", "time": "9:00", "students": ["A"]}])
        assert store[0].time == "09:00"
        store.add("POD-A", "09:00", ["B"])
        assert len(store) == 1
        assert store[0].students == ["A", "B"]

    @pytest.mark.parametrize("bad_time", ["", "nine", "25:00", None])
    def test_rejects_invalid_time(self, bad_time):
        with pytest.raises(ValueError):
            BookingStore().load([{"pod_id": "POD-A", "time": bad_time, "students": ["A"]}])

    def test_rejects_over_capacity(self):
        with pytest.raises(ValueError):
            BookingStore().load([{"pod_id": "POD-A", "time": "09:00", "students": list("ABCDE")}])
