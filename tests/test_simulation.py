import pytest

from parcelsim.parcel import ParcelState
from parcelsim.simulation import (
    Scenario,
    Simulation,
    load_scenario,
    main,
    parse_scenario,
    shortest_route,
)

SIMPLE = """
2 20 100 1
2
0 1
1 0
1
0 pac 1 org 0 dst 1
"""

LINE = """
5 10 50 2
3
0 1 0
1 0 1
0 1 0
3
0 pac 1 org 0 dst 2
3 pac 2 org 2 dst 0
7 pac 3 org 1 dst 2
"""

CROWDED = """
1 20 100 1
2
0 1
1 0
3
0 pac 1 org 0 dst 1
0 pac 2 org 0 dst 1
0 pac 3 org 0 dst 1
"""


def test_parse_scenario_reads_fields():
    scenario = parse_scenario(LINE)
    assert isinstance(scenario, Scenario)
    assert scenario.transport.capacity == 5
    assert scenario.transport.latency == 10
    assert scenario.transport.interval == 50
    assert scenario.transport.removal_cost == 2
    assert scenario.warehouse_count == 3
    assert scenario.adjacency[0] == [False, True, False]
    assert scenario.adjacency[1] == [True, False, True]
    assert [p.id for p in scenario.parcels] == [0, 1, 2]
    assert [p.posted_at for p in scenario.parcels] == [0, 3, 7]
    assert [(p.origin, p.destination) for p in scenario.parcels] == [(0, 2), (2, 0), (1, 2)]


@pytest.mark.parametrize(
    "text",
    [
        "",
        "1 2 3",
        "1 2 3 4\n2\n0 1\n1 0\n0",
        "1 2 3 4\n2\n0 2\n1 0\n1\n0 pac 1 org 0 dst 1",
        "1 2 3 4\n2\n0 1\n1 0\n1\n0 pac x org 0 dst 1",
        "1 2 3 4\n2\n0 1\n1 0\n2\n0 pac 1 org 0 dst 1",
    ],
)
def test_parse_scenario_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_scenario(text)


def test_load_scenario_matches_parse(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text(LINE)
    assert load_scenario(path) == parse_scenario(LINE)


def test_shortest_route_follows_edges():
    adjacency = parse_scenario(LINE).adjacency
    route = shortest_route(adjacency, 0, 2)
    assert route[0] == 0
    assert route[-1] == 2
    assert len(route) == 3
    assert all(adjacency[a][b] for a, b in zip(route, route[1:]))


def test_shortest_route_same_endpoint():
    adjacency = parse_scenario(LINE).adjacency
    assert shortest_route(adjacency, 1, 1) == [1]


def test_shortest_route_unreachable_gives_destination_only():
    adjacency = [[False, True, False], [True, False, False], [False, False, False]]
    assert shortest_route(adjacency, 0, 2) == [2]


def test_shortest_route_prefers_fewest_hops():
    adjacency = [
        [False, True, False, True],
        [True, False, True, False],
        [False, True, False, True],
        [True, False, True, False],
    ]
    route = shortest_route(adjacency, 0, 3)
    assert route == [0, 3]


def test_simple_worked_example():
    simulation = Simulation(parse_scenario(SIMPLE))
    assert simulation.run() == [
        "0000000 pacote 000 armazenado em 000 na secao 001",
        "0000101 pacote 000 removido de 000 na secao 001",
        "0000101 pacote 000 em transito de 000 para 001",
        "0000121 pacote 000 entregue em 001",
    ]


def test_all_delivered_before_and_after_run():
    simulation = Simulation(parse_scenario(LINE))
    assert simulation.all_delivered() is False
    simulation.run()
    assert simulation.all_delivered() is True
    assert all(p.state is ParcelState.DELIVERED for p in simulation.parcels)


def test_each_parcel_delivered_once_at_destination():
    scenario = parse_scenario(LINE)
    lines = Simulation(scenario).run()
    for parcel in scenario.parcels:
        delivered = [
            line for line in lines
            if f"pacote {parcel.display_id:03d} entregue em" in line
        ]
        assert len(delivered) == 1
        assert delivered[0].endswith(f"entregue em {parcel.destination:03d}")
    assert "entregue" in lines[-1]


def test_capacity_limits_load_and_restacks_rest():
    lines = Simulation(parse_scenario(CROWDED)).run()
    first_round = [line for line in lines if line.startswith("0000100") or line.startswith("000010")]
    removed = [line for line in first_round if "removido" in line]
    transit = [line for line in first_round if "em transito" in line]
    restacked = [line for line in first_round if "rearmazenado" in line]
    assert len(removed) == 3
    assert removed[0].split()[2] == "002"
    assert len(transit) == 1
    assert "pacote 000 em transito de 000 para 001" in transit[0]
    assert [line.split()[2] for line in restacked] == ["001", "002"]
    assert sum("entregue" in line for line in lines) == 3


def test_run_does_not_change_scenario_parcels():
    scenario = parse_scenario(LINE)
    Simulation(scenario).run()
    assert all(p.state is ParcelState.NOT_POSTED for p in scenario.parcels)


def test_main_requires_one_argument(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err != ""


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "error" in capsys.readouterr().err


def test_main_prints_log_without_trailing_newline(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(LINE)
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    expected = Simulation(parse_scenario(LINE)).run()
    assert out == "\n".join(expected)
    assert not out.endswith("\n")