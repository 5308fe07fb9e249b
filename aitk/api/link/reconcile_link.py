"""Make one target path a symlink to its source."""

import errno
import logging
import os

from .ConflictError import ConflictError
from .LinkSpec import LinkSpec
from .points_at import points_at
from .ReconcileResult import ReconcileResult
from .ReconcileStatus import ReconcileStatus

logger = logging.getLogger(__name__)


def _link(spec: LinkSpec) -> None:
    spec.target.symlink_to(spec.source, target_is_directory=spec.source.is_dir())


def _apply(spec: LinkSpec, canonicalize: bool) -> ReconcileStatus:
    if not spec.source.exists():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(spec.source))

    target = spec.target
    if target.is_symlink():
        if points_at(target, spec.source, canonicalize=canonicalize):
            return ReconcileStatus.ALREADY_LINKED
        target.unlink()
        _link(spec)
        return ReconcileStatus.RELINKED

    if target.exists():
        raise ConflictError(target)

    target.parent.mkdir(parents=True, exist_ok=True)
    _link(spec)
    return ReconcileStatus.CREATED


def reconcile_link(spec: LinkSpec, canonicalize: bool = True) -> ReconcileResult:
    """Reconcile ``spec.target`` so it is a symlink to ``spec.source``.

    - absent target: parents are created and the link is made (created)
    - symlink to the source: nothing changes (already-linked)
    - symlink elsewhere, dangling included: replaced (relinked)
    - regular file or directory: left untouched (conflict)

    Filesystem failures are returned as ``error`` results, never raised.
    """
    try:
        status = _apply(spec, canonicalize)
    except ConflictError as e:
        logger.warning(f"Conflict for {spec.display_name}: {e}")
        return ReconcileResult(
            spec=spec,
            status=ReconcileStatus.CONFLICT,
            reason=f"{e}. Please manually remove or back up: {spec.target}",
        )
    except OSError as e:
        logger.error(f"Failed to link {spec.target} -> {spec.source}: {e}")
        return ReconcileResult(spec=spec, status=ReconcileStatus.ERROR, reason=str(e))

    if status is ReconcileStatus.ALREADY_LINKED:
        logger.debug(f"{spec.target} already linked to {spec.source}")
    else:
        logger.info(f"{status.value}: {spec.target} -> {spec.source}")
    return ReconcileResult(spec=spec, status=status)
