"""Chef Mistral web app."""
