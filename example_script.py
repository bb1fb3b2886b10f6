from netconf_explorer import Explorer, NetconfSession
from netconf_explorer.api import prepare_get, send_request
from netconf_explorer.schema import SchemaNode
from netconf_explorer.utils.utils import init_logging

init_logging()

module = SchemaNode(
    "ietf-interfaces", "urn:ietf:params:xml:ns:yang:ietf-interfaces",
    keyword="module", prefix="if",
)
interface = module.add("interfaces").add("interface", keyword="list")
interface.add("name", keyword="leaf", is_key=True)
interface.add("description", keyword="leaf")

optional_args = {'port': 830, 'expand_limit': 50}
session = NetconfSession("127.0.0.1", "vagrant", "vagrant", 60, optional_args=optional_args)
session.open()

explorer = Explorer(session, modules=[module], optional_args=optional_args)
result = explorer.show_data([interface], value_filter="up")
for element in result.view.walk():
    print(element.caption)
if result.truncated:
    print("Not all matches have been expanded")

print(send_request(session.conn, prepare_get(interface)))
session.close()
