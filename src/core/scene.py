class Scene:
    """Hooks the engine drives. Scenes override what they need."""

    # Optional per-event handler (scenes can override)
    def handle_event(self, event) -> None:
        pass

    # Lifecycle hooks; both run inside the event loop
    def start(self) -> None:
        pass

    async def teardown(self) -> None:
        pass
