from mvlogic.renderers.renderer import Renderer, PerTypeRenderer
from mvlogic.renderers.text import R as TEXT_RENDERER
