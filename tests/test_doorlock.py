import pytest

from katas.doorlock import MAX_ATTEMPTS, MAX_PASSWORD_LENGTH, AccessDenied, DoorLock


@pytest.fixture
def lock():
    door = DoorLock()
    door.set_password("password")
    return door


def test_correct_password_unlocks(lock):
    assert lock.unlock("password") is True
    assert lock.attempts_left == MAX_ATTEMPTS


def test_wrong_password_uses_an_attempt(lock):
    assert lock.unlock("secret") is False
    assert lock.attempts_left == MAX_ATTEMPTS - 1


def test_correct_after_wrong_still_unlocks(lock):
    lock.unlock("secret")
    assert lock.unlock("password") is True


def test_last_wrong_attempt_denies_access(lock):
    for _ in range(MAX_ATTEMPTS - 1):
        assert lock.unlock("secret") is False
    with pytest.raises(AccessDenied):
        lock.unlock("secret")
    assert lock.locked_out is True


def test_locked_out_rejects_correct_password(lock):
    for _ in range(MAX_ATTEMPTS - 1):
        lock.unlock("secret")
    with pytest.raises(AccessDenied):
        lock.unlock("token")
    with pytest.raises(AccessDenied):
        lock.unlock("password")


def test_unlock_without_password_raises():
    with pytest.raises(RuntimeError):
        DoorLock().unlock("password")


def test_password_too_long_rejected():
    with pytest.raises(ValueError):
        DoorLock().set_password("x" * (MAX_PASSWORD_LENGTH + 1))


@pytest.mark.parametrize("bad", ["", "two words"])
def test_password_must_be_one_word(bad):
    with pytest.raises(ValueError):
        DoorLock().set_password(bad)


def test_custom_attempt_limit():
    door = DoorLock(max_attempts=1)
    door.set_password("token")
    with pytest.raises(AccessDenied):
        door.unlock("secret")


def test_attempt_limit_must_be_positive():
    with pytest.raises(ValueError):
        DoorLock(max_attempts=0)