from katas.speedywagon import (
    PillarMenSensor,
    activity_counter,
    alarm_control,
    connection_check,
    uv_alarm,
    uv_light_heuristic,
)


def test_connection_check_nothing_connected():
    assert connection_check(None) is False


def test_connection_check_connected_sensor():
    assert connection_check(PillarMenSensor(42, "colloseum", [])) is True


def test_activity_counter_three_default_sensors():
    rome = [PillarMenSensor() for _ in range(3)]
    assert activity_counter(rome) == 0


def test_activity_counter_two_with_real_data():
    rome = [PillarMenSensor(4900, "kars", []), PillarMenSensor(4102, "wham", [])]
    assert activity_counter(rome) == 9002


def test_activity_counter_no_sensors():
    assert activity_counter(None) == 0
    assert activity_counter([]) == 0


def test_alarm_control_nothing_connected():
    assert alarm_control(None) is False


def test_alarm_control_sensor():
    santana = PillarMenSensor(0, "Mexico", [1981, 1987])
    assert alarm_control(santana) is False
    santana.activity = 9002
    assert alarm_control(santana) is True


def test_uv_alarm_nothing_connected():
    assert uv_alarm(None) is False


def test_uv_alarm_with_mock_data():
    wham = PillarMenSensor(0, "Rome", [1, 605, 313, 4000])
    assert uv_alarm(wham) is True
    wham.activity = 9001
    assert uv_alarm(wham) is False


def test_uv_light_heuristic_counts_above_mean():
    assert uv_light_heuristic([1, 605, 313, 4000]) == 1
    assert uv_light_heuristic([1, 2, 3, 4]) == 2


def test_uv_light_heuristic_empty_and_flat():
    assert uv_light_heuristic([]) == 0
    assert uv_light_heuristic([5, 5, 5]) == 0