def routes(match):
    match("/", "home#index")
    match("users", "users#index")
    match("users/:id", "users#show")
    match("people/:id", {"redirect": lambda params: f"/users/{params['id']}"})
    match("members", {"redirect": "/users"})
    match("admin", "admin#index")
