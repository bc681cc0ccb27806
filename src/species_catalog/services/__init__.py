# ABOUTME: Third-party API integrations used by the catalog
# ABOUTME: Chat completions for the species assistant
