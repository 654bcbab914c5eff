"""API resources with dirty tracking."""

from pug_client.resources.base import Attribute, Resource, parse_payload
from pug_client.resources.campaign import Campaign
from pug_client.resources.enumerator import ResourceEnumerator
from pug_client.resources.live_stream import LiveStream
from pug_client.resources.namespace import Namespace
from pug_client.resources.namespace_client import NamespaceClient
from pug_client.resources.namespaced import NamespacedResource
from pug_client.resources.playlist import Playlist
from pug_client.resources.simulcast_target import SimulcastTarget
from pug_client.resources.video import Video
from pug_client.resources.webhook import Webhook

__all__ = [
    "Attribute",
    "Resource",
    "parse_payload",
    "ResourceEnumerator",
    "NamespacedResource",
    "Namespace",
    "Video",
    "LiveStream",
    "Campaign",
    "Webhook",
    "Playlist",
    "SimulcastTarget",
    "NamespaceClient",
]
