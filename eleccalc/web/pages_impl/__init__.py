"""Calculator panel implementations (render functions).

`eleccalc.web.router` maps each registered panel id to one of these.
"""
