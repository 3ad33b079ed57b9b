"""
Services Layer

Pure match-generation services that:
- Accept domain inputs (players, matches, set numbers)
- Return new domain values (matches, results)
- Do NOT depend on persistence or transport layers
- Do NOT mutate their inputs
"""
