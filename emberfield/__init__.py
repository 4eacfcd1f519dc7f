"""Camera, lighting, input, particle, vertex-layout and shader-source logic for real-time 3D fire scenes."""

__version__ = "0.1.0"
__all__ = ["camera", "light", "events", "particles", "layout", "shader_source"]