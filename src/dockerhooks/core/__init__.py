"""
dockerhooks core

Process execution, the docker command runner and the error taxonomy.
"""
