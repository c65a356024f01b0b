from typing import Any, Dict, Type

class Renderer:
    def __call__(self, *args: Any, **kwds: Any) -> Any:
        return self.render(*args, **kwds)

    def render(self, *args: Any, **kwds: Any) -> Any:
        ...

class PerTypeRenderer(Renderer):
    """ 
        Renderer that selects the appropriate renderer depending on the type of the object that should be rendered.
        The most specific registered class of the object wins (looked up along its method resolution order),
        objects of unregistered types go to the default renderer.
    """
    def __init__(self, renderers: Dict[Type, Renderer], default_renderer: Renderer) -> None:
        self.renderers = renderers
        self.default_renderer = default_renderer

    def get_renderer(self, obj: Any) -> Renderer:
        for cls in type(obj).__mro__:
            if cls in self.renderers:
                return self.renderers[cls]
        return self.default_renderer

    def render(self, obj: Any, *args: Any, **kwds: Any) -> Any:
        return self.get_renderer(obj).render(obj, *args, **kwds)
