import threading

from heaplayers.singleton import ExactlyOne, get_instance


def make_counted_class():
    class Counted:
        created = 0

        def __init__(self):
            type(self).created += 1

    return Counted


def test_get_instance_returns_same_object():
    cls = make_counted_class()
    first = get_instance(cls)
    assert get_instance(cls) is first
    assert cls.created == 1


def test_distinct_classes_get_distinct_instances():
    a = make_counted_class()
    b = make_counted_class()
    assert get_instance(a) is not get_instance(b)
    assert isinstance(get_instance(a), a)
    assert isinstance(get_instance(b), b)


def test_exactly_one_shares_instance_across_accessors():
    cls = make_counted_class()
    assert ExactlyOne(cls)() is ExactlyOne(cls)()
    assert ExactlyOne(cls)() is get_instance(cls)
    assert cls.created == 1


def test_concurrent_access_constructs_once():
    cls = make_counted_class()
    barrier = threading.Barrier(8)
    seen = []
    lock = threading.Lock()

    def work():
        barrier.wait()
        obj = get_instance(cls)
        with lock:
            seen.append(obj)

    threads = [threading.Thread(target=work) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    instance = get_instance(cls)
    assert len(seen) == 8
    assert all(obj is instance for obj in seen)
    assert cls.created == 1