from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Iterable, Protocol, runtime_checkable

from cloud_assembly.core import AlreadySynthesizedError, Settings, get_logger, load_settings
from cloud_assembly.session import SynthesisSession
from cloud_assembly.store import FileSystemStore, SessionStore

log = get_logger(__name__)


@runtime_checkable
class Synthesizable(Protocol):
    def synthesize(self, session: SynthesisSession) -> None: ...


class Synthesizer:
    """
    Runs a set of producers against one synthesis session.

    `run()` is memoized: the first call synthesizes and closes the session,
    later calls return that same session without re-running producers.
    """

    def __init__(
        self,
        producers: Iterable[Synthesizable] = (),
        *,
        outdir: Path | str | None = None,
        store: SessionStore | None = None,
        settings: Settings | None = None,
    ) -> None:
        if outdir is not None and store is not None:
            raise ValueError("Pass either outdir or store, not both")

        self._settings = settings or load_settings()
        self._outdir = Path(outdir) if outdir is not None else self._settings.outdir
        self._store = store
        self._producers: list[Synthesizable] = list(producers)
        self._session: SynthesisSession | None = None

    @property
    def producers(self) -> tuple[Synthesizable, ...]:
        return tuple(self._producers)

    def add(self, producer: Synthesizable) -> None:
        if self._session is not None:
            raise AlreadySynthesizedError("Cannot add producers after run()")
        self._producers.append(producer)

    def _make_store(self) -> SessionStore:
        if self._store is not None:
            return self._store
        if self._outdir is None:
            outdir = Path(tempfile.mkdtemp(prefix="cloud-assembly."))
        else:
            outdir = self._outdir
            outdir.mkdir(parents=True, exist_ok=True)
        return FileSystemStore(outdir)

    def run(self) -> SynthesisSession:
        if self._session is not None:
            return self._session

        store = self._make_store()
        session = SynthesisSession(
            store, version_reporting=self._settings.version_reporting
        )
        log.info("Synthesis starting", producers=len(self._producers), store=repr(store))

        for producer in self._producers:
            producer.synthesize(session)

        session.close()
        self._session = session
        return session
