"""Weekly employee shift planner."""