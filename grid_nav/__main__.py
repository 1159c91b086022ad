from .visualize import demo

demo()
