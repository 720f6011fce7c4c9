# Task board: in-memory Kanban tasks, three status columns, web UI + JSON API
#
# Components:
#   schema.py  - Data model (Task, TaskStatus)
#   store.py   - In-memory CRUD store (TaskStore, TaskNotFound, demo tasks)
#   render.py  - Pure board projection (columns + counts)
#   form.py    - Add/edit modal form parsing and submission
#   config.py  - YAML + environment configuration
#   server.py  - Flask app factory (HTML board, JSON API)
