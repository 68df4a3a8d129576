"""
Pydantic schema for the /scheduler endpoints.

SchedulerDefaults: the algorithm and quantum used when a simulation request
leaves them out. Changeable at runtime through PUT /scheduler/defaults.
"""

from pydantic import BaseModel, Field

from models.enums import Algorithm


class SchedulerDefaults(BaseModel):
    algorithm: Algorithm
    time_quantum: int = Field(..., gt=0, description="Default Round Robin slice length")
