"""
Skills app

Skill categories and the skills they own. Category updates carrying a
skills list replace the category's whole skill set.
"""
