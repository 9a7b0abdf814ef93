"""Facade binding every resource endpoint to one shared Request wrapper."""

from pathlib import Path
from typing import Optional, Union

from .api.client import Request
from .api.endpoints import (
    RESOURCES,
    CampaignsEndpoints,
    CatalogsEndpoints,
    ChannelsEndpoints,
    CommerceEndpoints,
    EmailEndpoints,
    EventsEndpoints,
    ExperimentsEndpoints,
    ExportEndpoints,
    InAppEndpoints,
    ListsEndpoints,
    MessageTypesEndpoints,
    MetadataEndpoints,
    PushEndpoints,
    SmsEndpoints,
    TemplatesEndpoints,
    UsersEndpoints,
    WebPushEndpoints,
    WorkflowsEndpoints,
)
from .core.config_manager import ClientConfig, load_config


class IterableClient:
    """Entry point exposing each resource group as an attribute.

    Example::

        client = IterableClient(Request("my-api-key"))
        client.sms.target({"campaignId": 49, "recipientEmail": "rec@email.com"})
    """

    campaigns: CampaignsEndpoints
    catalogs: CatalogsEndpoints
    channels: ChannelsEndpoints
    commerce: CommerceEndpoints
    email: EmailEndpoints
    events: EventsEndpoints
    experiments: ExperimentsEndpoints
    export: ExportEndpoints
    in_app: InAppEndpoints
    lists: ListsEndpoints
    message_types: MessageTypesEndpoints
    metadata: MetadataEndpoints
    push: PushEndpoints
    sms: SmsEndpoints
    templates: TemplatesEndpoints
    users: UsersEndpoints
    web_push: WebPushEndpoints
    workflows: WorkflowsEndpoints

    def __init__(self, request: Request):
        self.request = request
        for name, factory in RESOURCES.items():
            setattr(self, name, factory(request))

    @classmethod
    def from_config(cls, config: ClientConfig) -> 'IterableClient':
        return cls(Request.from_config(config))

    def close(self):
        self.request.close()

    def __enter__(self) -> 'IterableClient':
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


def create_client(api_key: Optional[str] = None,
                  config_path: Optional[Union[str, Path]] = None) -> IterableClient:
    """Build a client from an explicit key, a YAML file and/or the environment.

    An explicit ``api_key`` wins over ``ITERABLE_API_KEY`` and the file.

    Raises:
        ConfigurationError: If no API key can be found or the settings are invalid
    """
    config = load_config(config_path, api_key=api_key)
    return IterableClient.from_config(config)
