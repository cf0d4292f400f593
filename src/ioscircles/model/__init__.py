"""
The MODEL layer contains pure data structures and the overlap geometry.
It has NO knowledge of the GUI (Qt).
It deals with circle overlap areas, the step calibration data and the
headless layout of a rendered circle pair.
"""
