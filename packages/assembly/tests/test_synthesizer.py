from __future__ import annotations

from pathlib import Path

import pytest
from cloud_assembly import (
    AlreadySynthesizedError,
    InMemoryStore,
    Synthesizable,
    SynthesisSession,
    Synthesizer,
)
from cloud_assembly.core import Settings
from cloud_assembly_contracts import BUILD_FILE, MANIFEST_FILE

SETTINGS = Settings(_env_file=None, version_reporting=False)


class StackProducer:
    def __init__(self, name: str) -> None:
        self.name = name
        self.calls = 0

    def synthesize(self, session: SynthesisSession) -> None:
        self.calls += 1
        template = f"{self.name}.template.json"
        session.assembly.write_json(template, {"Resources": {}})
        session.add_artifact(
            self.name,
            {
                "type": "aws:cloudformation:stack",
                "environment": "aws://unknown-account/unknown-region",
                "properties": {"templateFile": template},
            },
        )


class BuildMe:
    def synthesize(self, session: SynthesisSession) -> None:
        session.add_build_step(
            "step_id", {"type": "build-step-type", "parameters": {"boom": 123}}
        )


def test_empty_run_is_memoized(tmp_path: Path) -> None:
    synth = Synthesizer(outdir=tmp_path / "out", settings=SETTINGS)
    session = synth.run()

    assert synth.run() is session
    assert session.assembly.list() == [MANIFEST_FILE]
    assert session.assembly.read_json(MANIFEST_FILE)["artifacts"] == {}


def test_producers_run_once_in_order(tmp_path: Path) -> None:
    one, two = StackProducer("one-stack"), StackProducer("another")
    synth = Synthesizer([one], outdir=tmp_path, settings=SETTINGS)
    synth.add(two)
    assert synth.producers == (one, two)

    session = synth.run()
    synth.run()

    assert one.calls == 1 and two.calls == 1
    assert session.assembly.list() == [
        "another.template.json",
        MANIFEST_FILE,
        "one-stack.template.json",
    ]
    assert list(session.manifest["artifacts"]) == ["one-stack", "another"]


def test_build_step_producer(tmp_path: Path) -> None:
    session = Synthesizer([BuildMe()], outdir=tmp_path, settings=SETTINGS).run()
    assert session.store.read_file(BUILD_FILE)
    assert session.assembly.read_json(BUILD_FILE) == {
        "steps": {"step_id": {"type": "build-step-type", "parameters": {"boom": 123}}}
    }


def test_add_after_run_rejected() -> None:
    synth = Synthesizer(store=InMemoryStore(), settings=SETTINGS)
    synth.run()
    with pytest.raises(AlreadySynthesizedError):
        synth.add(BuildMe())


def test_temp_outdir_when_unconfigured() -> None:
    session = Synthesizer([StackProducer("s")], settings=SETTINGS).run()
    root = session.store.root
    assert root.is_dir()
    assert (root / MANIFEST_FILE).is_file()


def test_outdir_and_store_are_exclusive(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        Synthesizer(outdir=tmp_path, store=InMemoryStore(), settings=SETTINGS)


def test_producer_protocol() -> None:
    assert isinstance(BuildMe(), Synthesizable)
    assert not isinstance(object(), Synthesizable)
