"""Page-level components for the NiceGUI interface.

Customer pages live under ``/dashboard`` and ``/profile``, staff pages under
``/admin``. Each page is defined with NiceGUI's @ui.page() decorator and is
registered when its module is imported.
"""
