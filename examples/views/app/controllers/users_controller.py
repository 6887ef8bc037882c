USERS = {"1": "ann", "2": "bob"}


def index(params):
    return "users/list", {"users": sorted(USERS.values())}


def show(params):
    return {"user": USERS.get(params.get("id"))}, None
