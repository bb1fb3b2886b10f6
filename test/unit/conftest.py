"""Test fixtures."""

from types import SimpleNamespace

import pytest
from lxml import etree

from napalm.base.test.double import BaseTestDouble
from ncclient.operations.rpc import RPCError
from ncclient.transport.errors import TransportError

from netconf_explorer.explorer import Explorer
from netconf_explorer.schema import SchemaNode
from netconf_explorer.session import NetconfSession
from netconf_explorer.tree import DataElement

IF_NS = "urn:ietf:params:xml:ns:yang:ietf-interfaces"
IP_NS = "urn:ietf:params:xml:ns:yang:ietf-ip"
SYS_NS = "urn:ietf:params:xml:ns:yang:ietf-system"

RPC_ERROR = """
<rpc-error xmlns="urn:ietf:params:xml:ns:netconf:base:1.0">
    <error-type>application</error-type>
    <error-tag>{tag}</error-tag>
    <error-severity>error</error-severity>
    <error-message>{message}</error-message>
</rpc-error>
"""


@pytest.fixture
def schema():
    """ietf-interfaces and ietf-system, reduced to what the mocked data uses."""
    interfaces_module = SchemaNode(
        "ietf-interfaces", IF_NS, keyword="module", prefix="if",
        description="Interface management",
    )
    interfaces = interfaces_module.add("interfaces")
    interface = interfaces.add("interface", keyword="list")
    name = interface.add("name", keyword="leaf", is_key=True)
    description = interface.add("description", keyword="leaf")
    interface.add("enabled", keyword="leaf")
    ipv4 = interface.add("ipv4", namespace=IP_NS, prefix="ip")
    address = ipv4.add("address", keyword="list")
    address.add("ip", keyword="leaf", is_key=True)
    address.add("prefix-length", keyword="leaf")

    system_module = SchemaNode(
        "ietf-system", SYS_NS, keyword="module", prefix="sys",
        description="System configuration and identification",
    )
    system = system_module.add("system")
    hostname = system.add("hostname", keyword="leaf")
    clock = system.add("clock")
    timezone = clock.add("timezone", keyword="choice")
    timezone_name = timezone.add("timezone-name", keyword="case").add("timezone-name", keyword="leaf")

    return SimpleNamespace(
        modules=[interfaces_module, system_module],
        interfaces_module=interfaces_module,
        interfaces=interfaces,
        interface=interface,
        name=name,
        description=description,
        ipv4=ipv4,
        address=address,
        system_module=system_module,
        system=system,
        hostname=hostname,
        clock=clock,
        timezone=timezone,
        timezone_name=timezone_name,
    )


@pytest.fixture
def device():
    return FakeNetconfDevice()


@pytest.fixture
def session(device):
    return NetconfSession("192.0.2.1", "admin", "admin", conn=device)


@pytest.fixture
def explorer(session, schema):
    return Explorer(session, modules=schema.modules)


@pytest.fixture
def document(device):
    """The operational data from mocked_data/get.xml as a DataElement tree."""
    return DataElement.from_xml(to_ele(device.read_txt_file(device.find_file("get.xml"))))


def make_tree(shape, parent=None):
    """
    Builds a DataElement tree from nested tuples (name, text_or_children).

    :param shape: e.g. ("data", [("a", "1"), ("b", [("c", "x")])])
    """
    name, content = shape
    element = DataElement(name, parent=parent)
    if isinstance(content, list):
        for child in content:
            make_tree(child, element)
    else:
        element.text = content
    return element


class FakeNetconfDevice(BaseTestDouble):
    """
    Fake ncclient manager serving replies from mocked_data.
    """

    def __init__(self, refuse_get=False, refuse_config=False, fail=False, fail_config=False):
        super(FakeNetconfDevice, self).__init__()
        self.refuse_get = refuse_get
        self.refuse_config = refuse_config
        self.fail = fail
        self.fail_config = fail_config
        self.calls = []

    def get(self, filter=None, with_defaults=None):
        self.calls.append(("get", None, filter, with_defaults))
        if self.fail:
            raise TransportError("Not connected to NETCONF server")
        if self.refuse_get:
            raise rpc_error("operation-not-supported", "operational data not available")
        return FakeGetReply(data=self.read_txt_file(self.find_file("get.xml")))

    def get_config(self, source, filter=None, with_defaults=None):
        self.calls.append(("get-config", source, filter, with_defaults))
        if self.fail or self.fail_config:
            raise TransportError("Not connected to NETCONF server")
        if self.refuse_config:
            raise rpc_error("access-denied", "access denied")
        return FakeGetReply(data=self.read_txt_file(self.find_file("get_config.xml")))

    def dispatch(self, rpc_command):
        self.calls.append(("dispatch", None, etree.QName(rpc_command).localname, None))
        if self.refuse_config:
            raise rpc_error("access-denied", "access denied")
        return FakeRPCReply(self.read_txt_file(self.find_file("dispatch.xml")))

    def close_session(self):
        pass


class FakeGetReply:
    """
    Will fake the GetReply class of ncclient
    """

    def __init__(self, data):
        self._data = data

    @property
    def data_xml(self):
        return to_ele(etree.fromstring(self._data.encode("UTF-8")))


class FakeRPCReply:
    def __init__(self, xml):
        self.xml = xml


def rpc_error(tag, message):
    return RPCError(to_ele(RPC_ERROR.format(tag=tag, message=message)))


def to_ele(x):
    return x if etree.iselement(x) else etree.fromstring(x.encode("UTF-8"))
