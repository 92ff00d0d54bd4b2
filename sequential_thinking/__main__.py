from sequential_thinking.main import main

main()
