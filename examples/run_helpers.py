from chef_helpers import ChefHelpersApp, HelperConfig, Node

import logging

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)

# --------------------------------
# Fleet fixture
# --------------------------------

fleet = [
    Node("web01", "prod", {
        "role": "web",
        "ipaddress": "10.0.1.11",
        "ec2": {"placement_availability_zone": "us-east-1a", "local_ipv4": "10.0.1.11"},
        "cloud": {"public_ipv4": "54.0.0.11"},
        "allies": ["bastion", "role:monitoring"],
    }),
    Node("db01", "prod", {
        "role": "db",
        "ipaddress": "10.0.2.21",
        "ec2": {"placement_availability_zone": "us-east-1c", "local_ipv4": "10.0.2.21"},
        "cloud": {"public_ipv4": "54.0.0.21"},
    }),
    Node("bastion", "_default", {
        "ipaddress": "192.0.2.5",
    }),
    Node("grafana", "ops", {
        "role": "monitoring",
        "ipaddress": "10.9.0.3",
        "ec2": {"placement_availability_zone": "eu-west-1b", "local_ipv4": "10.9.0.3"},
        "cloud": {"public_ipv4": "34.0.0.3"},
    }),
]

# --------------------------------
# Assembly
# --------------------------------

app = ChefHelpersApp(HelperConfig(directory_type="static"), nodes=fleet)
web = app.wrap(fleet[0])

# --------------------------------
# Queries
# --------------------------------

for ally in web.allies:
    print(f"{ally.name:10s} {web.ip_for(ally)}")

print(web["$.ec2.placement_availability_zone"])
print(web["role"])

app.shutdown()
