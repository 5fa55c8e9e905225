"""
End-to-end test for the command line demonstration.
"""

import demo
from src.patterns.singleton import OrderManager

EXPECTED_OUTPUT = (
    "Placing food order.\n"
    "Placing drink order.\n"
    "Calculating cost for food.\n"
    "Calculating cost for drink.\n"
)


def test_main_prints_sequence_and_succeeds(capsys, fresh_singletons):
    assert demo.main() == 0
    assert capsys.readouterr().out == EXPECTED_OUTPUT


def test_main_creates_order_manager(fresh_singletons):
    demo.main()
    assert OrderManager.has_instance()
