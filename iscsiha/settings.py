import os.path

pcs_binaries = "/usr/sbin/"
pacemaker_binaries = "/usr/sbin/"
pcs_exec = os.path.join(pcs_binaries, "pcs")
crm_resource_exec = os.path.join(pacemaker_binaries, "crm_resource")
sudo_exec = "/usr/bin/sudo"
# never prompt for a password, a command without a terminal would hang
sudo_options = ["--non-interactive", "--"]

# pacemaker resource ids may not contain these
resource_id_forbidden_chars = ":"
resource_id_replacement_char = "_"

# resource ids carry their role, used when members of a group disagree on
# where the group runs
vip_resource_id_marker = "_VIP_"
target_resource_id_marker = "_TARGET_"

colocation_constraint_score = "INFINITY"
order_constraint_kind = "mandatory"
