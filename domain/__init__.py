"""Describes the Chef Mistral domain. Centres around the `Pantry`.

Why is this small?

- The user keeps a list of ingredients. The only rule is that an ingredient
  is not blank.
- A recipe is whatever the model hands back. We render it, we don't own it.
- One request in flight at a time, gated by a loading flag.

The model sits behind an api, so it gets faked in the tests.
"""
