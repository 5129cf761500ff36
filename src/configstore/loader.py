from __future__ import annotations

import logging
import os
from typing import Mapping, Optional, TypeVar

from configstore.coercion import resolve
from configstore.fields import describe

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


def load(record: RecordT, environ: Optional[Mapping[str, str]] = None) -> RecordT:
    """
    Populate every field of `record` from the environment, falling back to declared defaults.

    Loading is not atomic. Fields are written in declaration order, so when field N
    fails to parse the error propagates with fields before it already assigned.
    """
    if environ is None:
        environ = os.environ

    descriptors = describe(record)
    for descriptor in descriptors:
        value = resolve(descriptor, environ)
        setattr(record, descriptor.name, value)
        if descriptor.secret:
            logger.debug("Loaded field=%s env=%s value=<redacted>", descriptor.name, descriptor.env)
        else:
            logger.debug("Loaded field=%s env=%s value=%r", descriptor.name, descriptor.env, value)

    logger.info("Configuration loaded. record=%s fields=%s", type(record).__name__, len(descriptors))
    return record
