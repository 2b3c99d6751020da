"""
Agents package - each agent is a self-contained module.

To add a new agent:
1. Create a new .py file in this folder (e.g., query_expansion.py)
2. Define a build() function returning AgentDescriptor.create(...) with:
   - name: str (unique identifier)
   - model: str (model name, see ModelIds)
   - description: str (what the agent does)
   - instruction: str (instructions for the agent)
3. Publish the result at module level as root_agent = build()

The agent will be automatically discovered by AgentRegistry.
"""
