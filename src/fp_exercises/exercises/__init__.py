"""
Exercise modules, runnable by name through the exercise runner.

  index              pipe and Option in two lines
  exo1_immutability  mutate in place vs build a new list
  exo2_pipe          chained calls vs pipe
  exo3_either        exceptions vs Result
  exo4_task          eager asyncio futures vs lazy Task
  exo5_chain         sequencing Results and Tasks with chain
"""
