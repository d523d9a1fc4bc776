"""
The MODEL layer contains pure data structures and the render core.
It has NO knowledge of the GUI (Qt).
It deals with geometry, projection, shading and the pixel buffer.
"""
