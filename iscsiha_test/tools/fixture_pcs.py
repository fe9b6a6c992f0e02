import json

AGENTS = {
    "rbd": ("ocf", "ceph"),
    "portblock": ("ocf", "heartbeat"),
    "IPaddr2": ("ocf", "heartbeat"),
    "iSCSITarget": ("ocf", "heartbeat"),
    "iSCSILogicalUnit": ("ocf", "heartbeat"),
    "Dummy": ("ocf", "pacemaker"),
}


def primitive(primitive_id, agent, **instance_attributes):
    """
    Return a primitive as 'pcs resource config --output-format json' does
    """
    standard, provider = AGENTS.get(agent, ("ocf", "heartbeat"))
    return {
        "id": primitive_id,
        "agent_name": {
            "standard": standard,
            "provider": provider,
            "type": agent,
        },
        "description": None,
        "operations": [],
        "meta_attributes": [],
        "instance_attributes": (
            [
                {
                    "id": f"{primitive_id}-instance_attributes",
                    "options": {},
                    "rule": None,
                    "nvpairs": [
                        {
                            "id": f"{primitive_id}-instance_attributes-{name}",
                            "name": name,
                            "value": value,
                        }
                        for name, value in instance_attributes.items()
                    ],
                }
            ]
            if instance_attributes
            else []
        ),
        "utilization": [],
    }


def group(group_id, member_ids):
    return {
        "id": group_id,
        "description": None,
        "member_ids": list(member_ids),
        "meta_attributes": [],
        "instance_attributes": [],
    }


def resources_config(primitives=(), groups=()):
    return json.dumps(
        {
            "primitives": list(primitives),
            "clones": [],
            "groups": list(groups),
            "bundles": [],
        }
    )


def iscsi_group(group_id, with_target=True, with_portblock_off=True):
    """
    Return primitives and the group of an exported target

    Members are named after their role, e.g. 'g1_TARGET_'.
    """
    primitives = [
        primitive(f"{group_id}_PORTBLOCK_ON_", "portblock", action="block"),
        primitive(f"{group_id}_VIP_", "IPaddr2", ip="10.0.0.10"),
    ]
    if with_target:
        primitives.append(
            primitive(
                f"{group_id}_TARGET_",
                "iSCSITarget",
                iqn=f"iqn.2026-10.com.example:{group_id}",
            )
        )
    primitives.append(primitive(f"{group_id}_LUN_", "iSCSILogicalUnit"))
    if with_portblock_off:
        primitives.append(
            primitive(
                f"{group_id}_PORTBLOCK_OFF_", "portblock", action="unblock"
            )
        )
    return primitives, group(group_id, [p["id"] for p in primitives])


STATUS_TEXT = """\
Cluster name: iscsi
Cluster Summary:
  * Stack: corosync (Pacemaker is running)
  * Current DC: node1 (version 2.1.7) - partition with quorum
  * 3 nodes configured
  * 6 resource instances configured

Node List:
  * Online: [ node1 node2 node3 ]

Full List of Resources:
  * Resource Group: g0:
    * g0_VIP_\t(ocf:heartbeat:IPaddr2):\t Stopped
  * Resource Group: g1:
    * rbd_g1\t(ocf:ceph:rbd):\t Started node3
    * g1_VIP_\t(ocf:heartbeat:IPaddr2):\t Started node3
  * Resource Group: g2:
    * g2_VIP_\t(ocf:heartbeat:IPaddr2):\t Stopped
  * Resource Group: g3:
    * g3_VIP_\t(ocf:heartbeat:IPaddr2):\t Started node2

Daemon Status:
  corosync: active/enabled
  pacemaker: active/enabled
  pcsd: active/enabled
"""
