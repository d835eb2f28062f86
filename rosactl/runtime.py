"""Per-invocation state handed to command handlers."""
import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional

from rosactl.config import Config
from rosactl.errors import LookupFailedError
from rosactl.ocm import OCMClient, OCMError
from rosactl.reporter import Reporter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Runtime:
    """Everything a command needs to talk to the API about one cluster."""
    ocm: OCMClient
    reporter: Reporter
    cluster_key: str
    creator: Optional[str] = None


@dataclass
class Invocation:
    """Stored on the click context by the root callback.

    `connect` builds the API client; tests replace it with a fake.
    """
    reporter: Reporter = field(default_factory=Reporter)
    connect: Callable[[], OCMClient] = OCMClient.from_config
    creator: Optional[str] = field(default_factory=lambda: Config.ROSA_CREATOR_ARN or None)

    @contextmanager
    def runtime(self, cluster_key: str) -> Iterator[Runtime]:
        """Open a connection for the duration of a command and always close it."""
        try:
            client = self.connect()
        except OCMError as e:
            raise LookupFailedError(f"Failed to create OCM connection: {e}") from e
        try:
            yield Runtime(
                ocm=client,
                reporter=self.reporter,
                cluster_key=cluster_key,
                creator=self.creator,
            )
        finally:
            logger.debug("Releasing runtime for cluster '%s'", cluster_key)
            client.close()
