"""
Flow Kit module.

Provides the gameplay-flow systems built on top of the flow engine:
- State (named progress counters and conditions)
- Interaction (interactables, chained interactions, pickups, triggers)
- Menus (menu panels and the menu stack)
- Modes (Play / Dialogue / Cutscene / Pause and the player input)
- Dialogue (script-driven lines, choices and the dialogue box)
- Scene (JSON scene data)
- Settings (player settings lookups)
"""
