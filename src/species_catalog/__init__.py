# ABOUTME: Species catalog backend: Wikipedia autofill lookup and species chat assistant
# ABOUTME: Layers: extraction (lookup), models (form schema), services (chat), web (HTTP API)
