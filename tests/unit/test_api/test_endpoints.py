"""
Unit tests for the resource endpoints.

Each endpoint method must issue exactly one call to the expected wrapper
verb, with the expected URL and the caller's payload passed through.
"""

from unittest.mock import Mock

import pytest
import requests
from requests.adapters import HTTPAdapter

from iterable_api.api.client import Request
from iterable_api.api.endpoints import (
    RESOURCES,
    BaseEndpoint,
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
from tests.fixtures.sample_data import (
    SAMPLE_SMS_TARGET,
    SAMPLE_USER_UPDATE,
    SAMPLE_CATALOG_ITEM,
    SAMPLE_CATALOG_UPDATE,
)

BODY = {"some": "payload"}
PARAMS = {"limit": 100}

# (factory, method, args, wrapper verb, expected positional call args)
ENDPOINT_CASES = [
    (ListsEndpoints, "get", (), "get", ("/lists",)),
    (ListsEndpoints, "create", (BODY,), "post", ("/lists", BODY)),
    (ListsEndpoints, "delete", (12,), "delete", ("/lists/12",)),
    (ListsEndpoints, "get_users", ({"listId": 12},), "get", ("/lists/getUsers", {"listId": 12})),
    (ListsEndpoints, "subscribe", (BODY,), "post", ("/lists/subscribe", BODY)),
    (ListsEndpoints, "unsubscribe", (BODY,), "post", ("/lists/unsubscribe", BODY)),

    (UsersEndpoints, "get", ("some@email.com",), "get", ("/users/some@email.com",)),
    (UsersEndpoints, "get_by_user_id", ("u-1",), "get", ("/users/byUserId/u-1",)),
    (UsersEndpoints, "delete", ("some@email.com",), "delete", ("/users/some@email.com",)),
    (UsersEndpoints, "delete_by_user_id", ("u-1",), "delete", ("/users/byUserId/u-1",)),
    (UsersEndpoints, "update", (SAMPLE_USER_UPDATE,), "post", ("/users/update", SAMPLE_USER_UPDATE)),
    (UsersEndpoints, "update_email", (BODY,), "post", ("/users/updateEmail", BODY)),
    (UsersEndpoints, "bulk_update", (BODY,), "post", ("/users/bulkUpdate", BODY)),
    (UsersEndpoints, "update_subscriptions", (BODY,), "post", ("/users/updateSubscriptions", BODY)),
    (UsersEndpoints, "bulk_update_subscriptions", (BODY,), "post",
     ("/users/bulkUpdateSubscriptions", BODY)),
    (UsersEndpoints, "register_device_token", (BODY,), "post", ("/users/registerDeviceToken", BODY)),
    (UsersEndpoints, "register_browser_token", (BODY,), "post", ("/users/registerBrowserToken", BODY)),
    (UsersEndpoints, "disable_device", (BODY,), "post", ("/users/disableDevice", BODY)),
    (UsersEndpoints, "get_fields", (), "get", ("/users/getFields",)),
    (UsersEndpoints, "get_sent_messages", (PARAMS,), "get", ("/users/getSentMessages", PARAMS)),

    (EventsEndpoints, "get", ("some@email.com", PARAMS), "get", ("/events/some@email.com", PARAMS)),
    (EventsEndpoints, "track", (BODY,), "post", ("/events/track", BODY)),
    (EventsEndpoints, "track_bulk", (BODY,), "post", ("/events/trackBulk", BODY)),
    (EventsEndpoints, "track_push_open", (BODY,), "post", ("/events/trackPushOpen", BODY)),
    (EventsEndpoints, "track_in_app_open", (BODY,), "post", ("/events/trackInAppOpen", BODY)),
    (EventsEndpoints, "track_in_app_click", (BODY,), "post", ("/events/trackInAppClick", BODY)),

    (CampaignsEndpoints, "get", (), "get", ("/campaigns",)),
    (CampaignsEndpoints, "create", (BODY,), "post", ("/campaigns/create", BODY)),
    (CampaignsEndpoints, "metrics", (PARAMS,), "get", ("/campaigns/metrics", PARAMS)),
    (CampaignsEndpoints, "child_campaigns", (7, PARAMS), "get",
     ("/campaigns/recurring/7/childCampaigns", PARAMS)),

    (CatalogsEndpoints, "get", (PARAMS,), "get", ("/catalogs", PARAMS)),
    (CatalogsEndpoints, "create", ("fancy-restaurants",), "post", ("/catalogs/fancy-restaurants", {})),
    (CatalogsEndpoints, "delete", ("fancy-restaurants",), "delete", ("/catalogs/fancy-restaurants",)),
    (CatalogsEndpoints, "get_field_mappings", ("fancy-restaurants",), "get",
     ("/catalogs/fancy-restaurants/fieldMappings",)),
    (CatalogsEndpoints, "update_field_mappings", ("fancy-restaurants", BODY), "put",
     ("/catalogs/fancy-restaurants/fieldMappings", BODY)),
    (CatalogsEndpoints, "get_items", ("fancy-restaurants", PARAMS), "get",
     ("/catalogs/fancy-restaurants/items", PARAMS)),
    (CatalogsEndpoints, "get_item", ("fancy-restaurants", "1"), "get",
     ("/catalogs/fancy-restaurants/items/1",)),
    (CatalogsEndpoints, "create_item", ("fancy-restaurants", "1", SAMPLE_CATALOG_ITEM), "put",
     ("/catalogs/fancy-restaurants/items/1", SAMPLE_CATALOG_ITEM)),
    (CatalogsEndpoints, "update_item", ("fancy-restaurants", "1", SAMPLE_CATALOG_UPDATE), "patch",
     ("/catalogs/fancy-restaurants/items/1", SAMPLE_CATALOG_UPDATE)),
    (CatalogsEndpoints, "delete_item", ("fancy-restaurants", "1"), "delete",
     ("/catalogs/fancy-restaurants/items/1",)),

    (ChannelsEndpoints, "get", (), "get", ("/channels",)),
    (MessageTypesEndpoints, "get", (), "get", ("/messageTypes",)),

    (CommerceEndpoints, "track_purchase", (BODY,), "post", ("/commerce/trackPurchase", BODY)),
    (CommerceEndpoints, "update_cart", (BODY,), "post", ("/commerce/updateCart", BODY)),

    (EmailEndpoints, "target", (BODY,), "post", ("/email/target", BODY)),
    (EmailEndpoints, "view_in_browser", (PARAMS,), "get", ("/email/viewInBrowser", PARAMS)),
    (PushEndpoints, "target", (BODY,), "post", ("/push/target", BODY)),
    (WebPushEndpoints, "target", (BODY,), "post", ("/webPush/target", BODY)),
    (InAppEndpoints, "get_messages", (PARAMS,), "get", ("/inApp/getMessages", PARAMS)),
    (InAppEndpoints, "target", (BODY,), "post", ("/inApp/target", BODY)),

    (ExperimentsEndpoints, "metrics", (PARAMS,), "get", ("/experiments/metrics", PARAMS)),

    (ExportEndpoints, "data_json", (PARAMS,), "get", ("/export/data.json", PARAMS)),
    (ExportEndpoints, "data_csv", (PARAMS,), "get", ("/export/data.csv", PARAMS)),
    (ExportEndpoints, "user_events", (PARAMS,), "get", ("/export/userEvents", PARAMS)),
    (ExportEndpoints, "start", (BODY,), "post", ("/export/start", BODY)),
    (ExportEndpoints, "status", (42,), "get", ("/export/42",)),
    (ExportEndpoints, "files", (42, PARAMS), "get", ("/export/42/files", PARAMS)),
    (ExportEndpoints, "cancel", (42,), "delete", ("/export/42",)),

    (MetadataEndpoints, "get_tables", (), "get", ("/metadata",)),
    (MetadataEndpoints, "get_table", ("stores",), "get", ("/metadata/stores",)),
    (MetadataEndpoints, "delete_table", ("stores",), "delete", ("/metadata/stores",)),
    (MetadataEndpoints, "get_key", ("stores", "nyc"), "get", ("/metadata/stores/nyc",)),
    (MetadataEndpoints, "put_key", ("stores", "nyc", BODY), "put", ("/metadata/stores/nyc", BODY)),
    (MetadataEndpoints, "delete_key", ("stores", "nyc"), "delete", ("/metadata/stores/nyc",)),

    (SmsEndpoints, "target", (SAMPLE_SMS_TARGET,), "post", ("/sms/target", SAMPLE_SMS_TARGET)),

    (TemplatesEndpoints, "get", (PARAMS,), "get", ("/templates", PARAMS)),
    (TemplatesEndpoints, "get_by_client_template_id", (PARAMS,), "get",
     ("/templates/getByClientTemplateId", PARAMS)),

    (WorkflowsEndpoints, "get", (PARAMS,), "get", ("/workflows", PARAMS)),
    (WorkflowsEndpoints, "trigger", (BODY,), "post", ("/workflows/triggerWorkflow", BODY)),
]


@pytest.mark.unit
@pytest.mark.parametrize(
    "factory, method, args, verb, expected",
    ENDPOINT_CASES,
    ids=[f"{case[0].__name__}.{case[1]}" for case in ENDPOINT_CASES],
)
def test_endpoint_forwards_to_wrapper(mock_request, factory, method, args, verb, expected):
    """Endpoint method -> exactly one wrapper call with URL and payload"""
    mock_verb = getattr(mock_request, verb)
    mock_verb.return_value = {"code": "Success"}

    result = getattr(factory(mock_request), method)(*args)

    assert result == {"code": "Success"}
    mock_verb.assert_called_once_with(*expected)
    for other in {"get", "post", "put", "patch", "delete"} - {verb}:
        getattr(mock_request, other).assert_not_called()


class TestSmsEndpoints:
    """SMS resource, exercised with a bare object exposing the wrapper verbs"""

    @pytest.mark.unit
    def test_target_posts_payload(self):
        request = Mock(spec=["get", "post", "delete"])
        client = SmsEndpoints(request)

        client.target(SAMPLE_SMS_TARGET)

        request.post.assert_called_once_with("/sms/target", SAMPLE_SMS_TARGET)

    @pytest.mark.unit
    def test_target_returns_wrapper_result(self, mock_request):
        mock_request.post.return_value = {"msg": "", "code": "Success", "params": None}

        assert SmsEndpoints(mock_request).target(SAMPLE_SMS_TARGET)["code"] == "Success"


class TestTemplatesEndpoints:
    """Per-medium template methods"""

    @pytest.mark.unit
    @pytest.mark.parametrize("kind", ["email", "push", "sms", "inapp"])
    def test_medium_methods(self, mock_request, kind):
        templates = TemplatesEndpoints(mock_request)

        getattr(templates, f"get_{kind}")({"templateId": 3})
        getattr(templates, f"update_{kind}")(BODY)
        getattr(templates, f"upsert_{kind}")(BODY)

        mock_request.get.assert_called_once_with(f"/templates/{kind}/get", {"templateId": 3})
        assert [c.args for c in mock_request.post.call_args_list] == [
            (f"/templates/{kind}/update", BODY),
            (f"/templates/{kind}/upsert", BODY),
        ]


class TestEndpointDefaults:
    """Optional params default to None; the wrapper turns that into {}"""

    @pytest.mark.unit
    def test_optional_params_pass_none(self, mock_request):
        CatalogsEndpoints(mock_request).get_items("fancy-restaurants")
        mock_request.get.assert_called_once_with("/catalogs/fancy-restaurants/items", None)

    @pytest.mark.unit
    def test_none_params_reach_transport_as_empty_dict(self, request_wrapper):
        WorkflowsEndpoints(request_wrapper).get()
        request_wrapper.session.request.assert_called_once_with(
            "GET", "https://api.iterable.com/api/workflows", params={}
        )


class TestBaseEndpoint:

    @pytest.mark.unit
    def test_cannot_instantiate_abstract_base(self, mock_request):
        with pytest.raises(TypeError):
            BaseEndpoint(mock_request)

    @pytest.mark.unit
    def test_build_endpoint_substitutes_params(self, mock_request):
        catalogs = CatalogsEndpoints(mock_request)
        assert catalogs._build_endpoint() == "/catalogs"
        assert catalogs._build_endpoint("/{name}/items", name="shoes") == "/catalogs/shoes/items"

    @pytest.mark.unit
    def test_endpoint_holds_only_the_wrapper(self, mock_request):
        lists = ListsEndpoints(mock_request)
        assert vars(lists) == {"request": mock_request, "base_path": "/lists"}

    @pytest.mark.unit
    def test_registry_covers_every_factory(self):
        assert len(RESOURCES) == 18
        assert all(issubclass(factory, BaseEndpoint) for factory in RESOURCES.values())

    @pytest.mark.unit
    def test_factories_accept_real_wrapper(self, api_key):
        request = Request(api_key)
        for factory in RESOURCES.values():
            assert factory(request).request is request
        request.close()


class RecordingAdapter(HTTPAdapter):
    """Transport adapter that records prepared requests instead of sending them"""

    def __init__(self):
        super().__init__()
        self.sent = []

    def send(self, request, **kwargs):
        self.sent.append(request)
        response = requests.Response()
        response.status_code = 200
        response._content = b'{"code": "Success"}'
        response.headers["Content-Type"] = "application/json"
        response.url = request.url
        response.request = request
        return response


class TestPathParameterEscaping:
    """Path values stay inside their own URL segment"""

    @pytest.fixture
    def recording_wrapper(self, api_key):
        wrapper = Request(api_key)
        adapter = RecordingAdapter()
        wrapper.session.mount("https://", adapter)
        yield wrapper, adapter
        wrapper.close()

    @pytest.mark.unit
    @pytest.mark.parametrize("factory, method, args, verb, expected_url", [
        (UsersEndpoints, "get", ("a#b@example.com",), "GET",
         "https://api.iterable.com/api/users/a%23b@example.com"),
        (UsersEndpoints, "get_by_user_id", ("team?x=1",), "GET",
         "https://api.iterable.com/api/users/byUserId/team%3Fx%3D1"),
        (UsersEndpoints, "delete_by_user_id", ("../../lists/5",), "DELETE",
         "https://api.iterable.com/api/users/byUserId/..%2F..%2Flists%2F5"),
        (CatalogsEndpoints, "get_item", ("shoes", "sku/1"), "GET",
         "https://api.iterable.com/api/catalogs/shoes/items/sku%2F1"),
        (UsersEndpoints, "get", ("some@email.com",), "GET",
         "https://api.iterable.com/api/users/some@email.com"),
    ])
    def test_sent_url(self, recording_wrapper, factory, method, args, verb, expected_url):
        wrapper, adapter = recording_wrapper

        getattr(factory(wrapper), method)(*args)

        assert len(adapter.sent) == 1
        assert adapter.sent[0].method == verb
        assert adapter.sent[0].url == expected_url

    @pytest.mark.unit
    def test_build_endpoint_escapes_values(self, mock_request):
        catalogs = CatalogsEndpoints(mock_request)
        assert catalogs._build_endpoint("{name}/items/{item_id}", name="my shoes", item_id="a/b") == \
            "/catalogs/my%20shoes/items/a%2Fb"

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["", ".", ".."])
    def test_dot_segments_rejected(self, mock_request, value):
        with pytest.raises(ValueError, match="cannot be used as a path segment"):
            UsersEndpoints(mock_request).delete_by_user_id(value)
        mock_request.delete.assert_not_called()
