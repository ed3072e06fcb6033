"""FunctionService — Knative manifests for a riff function.

Pipeline: VALIDATE → BUILD SERVICE → BUILD CHANNEL/SUBSCRIPTION → RESPOND

Manifests are plain dicts shaped like the Kubernetes objects a cluster client
would submit. Nothing here talks to a cluster.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel

from riffcli.config.models import FunctionConfig
from riffcli.services.result import ServiceResult
from riffcli.validation.naming import is_dns1123_label, is_dns1123_subdomain

logger = logging.getLogger(__name__)

SERVING_API_VERSION = "serving.knative.dev/v1alpha1"
EVENTING_API_VERSION = "eventing.knative.dev/v1alpha1"


class CreateFunctionOptions(BaseModel):
    """Inputs for a function's Knative Service."""

    model_config = {"frozen": True}

    name: str
    namespace: str
    image: str
    git_repo: str | None = None
    git_revision: str = "master"


class CreateChannelOptions(BaseModel):
    """Inputs for the channel a function subscribes to."""

    model_config = {"frozen": True}

    name: str
    namespace: str
    bus: str = "stub"


def _metadata(name: str, namespace: str) -> dict[str, Any]:
    return {"name": name, "namespace": namespace}


def service_manifest(options: CreateFunctionOptions) -> dict[str, Any]:
    """Build a ``Service`` that always runs the latest revision of *options.image*."""
    configuration: dict[str, Any] = {
        "revisionTemplate": {
            "spec": {
                "container": {"image": options.image},
            },
        },
    }
    if options.git_repo:
        configuration["build"] = {
            "source": {
                "git": {"url": options.git_repo, "revision": options.git_revision},
            },
        }
    return {
        "apiVersion": SERVING_API_VERSION,
        "kind": "Service",
        "metadata": _metadata(options.name, options.namespace),
        "spec": {"runLatest": {"configuration": configuration}},
    }


def channel_manifest(options: CreateChannelOptions) -> dict[str, Any]:
    return {
        "apiVersion": EVENTING_API_VERSION,
        "kind": "Channel",
        "metadata": _metadata(options.name, options.namespace),
        "spec": {"clusterBus": options.bus},
    }


def subscription_manifest(channel: CreateChannelOptions, subscriber: str) -> dict[str, Any]:
    return {
        "apiVersion": EVENTING_API_VERSION,
        "kind": "Subscription",
        "metadata": _metadata(subscriber, channel.namespace),
        "spec": {"channel": channel.name, "subscriber": subscriber},
    }


class FunctionService:
    """Builds the manifests behind ``riff function create``."""

    def __init__(self, config: FunctionConfig | None = None) -> None:
        self._config = config or FunctionConfig()

    def default_image(self, name: str, namespace: str) -> str:
        """Image reference used when a function is built from source."""
        return f"{self._config.registry}/{namespace}/{name}"

    def create_function(
        self,
        options: CreateFunctionOptions,
        *,
        channel: CreateChannelOptions | None = None,
    ) -> ServiceResult:
        """Build the Service for *options*, plus a Channel and Subscription if given."""
        op = "create_function"

        ns_errors = is_dns1123_label(options.namespace)
        if ns_errors:
            return ServiceResult.failure(
                op,
                "INVALID_NAMESPACE",
                f"Invalid namespace {options.namespace!r}: {', '.join(ns_errors)}",
            )

        manifests = [service_manifest(options)]
        warnings: list[str] = []

        if channel is not None:
            channel_errors = is_dns1123_subdomain(channel.name)
            if channel_errors:
                return ServiceResult.failure(
                    op,
                    "INVALID_CHANNEL",
                    f"Invalid channel {channel.name!r}: {', '.join(channel_errors)}",
                    channel=channel.name,
                )
            if channel.namespace != options.namespace:
                warnings.append(
                    f"Channel namespace {channel.namespace!r} differs from "
                    f"function namespace {options.namespace!r}"
                )
            manifests.append(channel_manifest(channel))
            manifests.append(subscription_manifest(channel, options.name))

        logger.debug(
            "Built %d manifest(s) for function %s/%s",
            len(manifests),
            options.namespace,
            options.name,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "name": options.name,
                "namespace": options.namespace,
                "image": options.image,
                "manifests": manifests,
            },
            warnings=warnings,
        )
