import json
from pathlib import Path

from wallj.db.replay_log import (
    RUN_LOG_NAME,
    append_tick_payload,
    create_run_folder,
    write_header,
)
from wallj.render.replay_reader import read_header, read_tick_payloads
from wallj.sim.contracts import BoardSnapshot, Event, TickPayload


def test_replay_log_header_and_ticks(tmp_path: Path) -> None:
    run_dir, log_path = create_run_folder(tmp_path, timestamp="2026-10-19T09-30-00Z")
    write_header(log_path, metadata={"run_id": run_dir.name})

    append_tick_payload(log_path, TickPayload(tick=1, state=_build_board()))

    with log_path.open("r", encoding="utf-8") as handle:
        records = [json.loads(line) for line in handle]

    assert log_path.name == RUN_LOG_NAME
    assert records[0]["type"] == "header"
    assert records[0]["metadata"]["run_id"] == run_dir.name
    assert records[1]["type"] == "tick"
    assert records[1]["payload"]["tick"] == 1
    assert records[1]["payload"]["state"]["player"] == [1, 1]


def test_replay_reader_round_trips_payloads(tmp_path: Path) -> None:
    run_dir, log_path = create_run_folder(tmp_path, timestamp="2026-10-19T09-31-00Z")
    write_header(log_path, metadata={"run_id": run_dir.name, "level": 3})
    payload = TickPayload(
        tick=2,
        elapsed_ms=30,
        state=_build_board(),
        events=[Event(kind="MOVE", payload={"from": [1, 1], "to": [2, 1]})],
    )
    append_tick_payload(log_path, payload)
    with log_path.open("a", encoding="utf-8") as handle:
        handle.write("not json\n")

    payloads = list(read_tick_payloads(log_path))

    assert read_header(log_path) == {"run_id": run_dir.name, "level": 3}
    assert payloads == [payload]


def _build_board() -> BoardSnapshot:
    return BoardSnapshot(
        width=4,
        length=3,
        rows=["WWWW", "W  W", "WWWW"],
        player=(1, 1),
        path=[(1, 1), (2, 1)],
        path_index=0,
    )
