# Core module — settings and exceptions
