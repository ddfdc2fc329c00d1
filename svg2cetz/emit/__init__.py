"""Output side of svg2cetz: primitives, their CeTZ rendering and output sinks."""
