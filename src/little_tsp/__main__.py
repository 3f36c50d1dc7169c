from little_tsp.scripts.reduce_cost_matrix import main

if __name__ == '__main__':
    raise SystemExit(main())
