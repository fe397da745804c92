"""Operations shared by the CLI and the HTTP layer.

Managers merge request input with settings defaults and run the inference
core.  They raise domain exceptions (``DiscoveryError``,
``UnassignedProjectRootError``), never HTTP or click exceptions -- that
translation is the caller's responsibility.
"""
