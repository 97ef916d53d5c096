from nxt_telegrams.config import UNSET, OutputStateConfig
from nxt_telegrams.constants import OutputPort, RegulationMode, RunState


def test_defaults():
    cfg = OutputStateConfig()

    assert cfg.as_dict() == {
        "port": UNSET,
        "power": 0,
        "mode_flags": 0,
        "regulation_mode": RegulationMode.IDLE,
        "turn_ratio": 0,
        "run_state": RunState.IDLE,
        "tacho_limit": 0,
    }


def test_field_names_follow_telegram_order():
    assert OutputStateConfig.field_names() == (
        "port",
        "power",
        "mode_flags",
        "regulation_mode",
        "turn_ratio",
        "run_state",
        "tacho_limit",
    )


def test_values_are_not_validated_here():
    # OutputState does the checking; the config only carries values.
    cfg = OutputStateConfig(port=OutputPort.A, power=500)
    assert cfg.power == 500


def test_unset_port_survives_as_dict():
    assert OutputStateConfig().as_dict()["port"] is UNSET
