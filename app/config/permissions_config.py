"""
Access Rules Configuration
This config defines, per resource type, which relations a principal must hold
to perform each action. Evaluated by app.core.authorization.

Relations:
- owner: the resource's primary holder (project owner, team lead, notification
  recipient, time log author, the user themselves; for tasks and attachments,
  the parent project's owner)
- member: listed in the resource's membership table (for tasks and attachments,
  any principal who can access the parent project)
- any: every authenticated principal
"""

OWNER = "owner"
MEMBER = "member"
ANY = "any"

# admin_override: whether the Admin role bypasses the relation check
# An empty relation set means admin only.
ACCESS_RULES = {
    "project": {
        "admin_override": True,
        "actions": {
            "read": {OWNER, MEMBER},
            "update": {OWNER},
            "delete": {OWNER},
            "manage_members": {OWNER},
        },
        "description": "Projects are owned by their creator and shared through project_members",
    },
    "task": {
        "admin_override": True,
        "actions": {
            "create": {OWNER, MEMBER},
            "read": {OWNER, MEMBER},
            "update": {OWNER, MEMBER},
            "delete": {OWNER},
        },
        "description": "Tasks inherit access from their project; only the project owner deletes",
    },
    "team": {
        "admin_override": True,
        "actions": {
            "read": {OWNER, MEMBER},
            "update": {OWNER},
            "delete": {OWNER},
            "manage_members": {OWNER},
        },
        "description": "Teams are governed by their lead (teams.lead_id)",
    },
    "notification": {
        "admin_override": False,
        "actions": {
            "read": {OWNER},
            "update": {OWNER},
            "delete": {OWNER},
        },
        "description": "Notifications are private to their recipient",
    },
    "tag": {
        "admin_override": True,
        "actions": {
            "create": {ANY},
            "read": {ANY},
            "update": {ANY},
            "delete": {ANY},
        },
        "description": "Tags are a shared global vocabulary",
    },
    "time_log": {
        "admin_override": True,
        "actions": {
            "read": {OWNER},
            "update": {OWNER},
            "delete": {OWNER},
        },
        "description": "Time logs belong to the user who recorded them",
    },
    "user": {
        "admin_override": True,
        "actions": {
            "read_time_logs": {OWNER},
            "manage_roles": set(),
        },
        "description": "Users see their own time history; only admins change global roles",
    },
    "attachment": {
        "admin_override": True,
        "actions": {
            "create": {OWNER, MEMBER},
            "read": {OWNER, MEMBER},
            "delete": {OWNER, MEMBER},
        },
        "description": "Attachments inherit access from their task's project",
    },
}
