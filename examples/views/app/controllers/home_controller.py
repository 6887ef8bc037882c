def index(params):
    return {"title": "Home"}, None
