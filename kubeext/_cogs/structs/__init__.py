"""
All the structures to describe the K8s API objects & resources,
and the parameters of the API calls.

All the functions here are purely data-manipulative and computational.
No external calls or any i/o activities are done here.
"""
